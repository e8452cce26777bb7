from sim_logs.base import Logger
from datetime import datetime, timezone
from pathlib import Path
import json
import os

LOG_DIR = os.getenv("LOG_DIR", "logs")

class FileLogger(Logger):
    """Appends one JSON object per event to `<base_path>/<log_type>.log`."""

    def __init__(self, log_type="server", base_path=None):
        self.log_type = log_type
        self.path = Path(base_path or LOG_DIR) / f"{log_type}.log"
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def _write(self, level, msg, data):
        ts = datetime.now(timezone.utc).isoformat()
        with open(self.path, "a") as f:
            f.write(json.dumps({
                "ts": ts,
                "log_type": self.log_type,
                "level": level,
                "event": msg,
                **data
            }, default=str) + "\n")

    def info(self, msg, **data):
        self._write("INFO", msg, data)

    def debug(self, msg, **data):
        self._write("DEBUG", msg, data)

    def warning(self, msg, **data):
        self._write("WARN", msg, data)

    def error(self, msg, **data):
        self._write("ERROR", msg, data)
