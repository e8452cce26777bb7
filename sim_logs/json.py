from sim_logs.base import Logger, split_context
from datetime import datetime, timezone
import json

class JSONLogger(Logger):
    def __init__(self, log_type="server"):
        self.log_type = log_type

    def _log(self, level, msg, data):
        # context fields sit next to `event` so they can be filtered on directly
        context, rest = split_context(data)
        print(json.dumps({
            "ts": datetime.now(timezone.utc).isoformat(),
            "log_type": self.log_type,
            "level": level,
            "event": msg,
            **context,
            "data": rest
        }, default=str))

    def info(self, msg, **data):
        self._log("INFO", msg, data)

    def debug(self, msg, **data):
        self._log("DEBUG", msg, data)

    def warning(self, msg, **data):
        self._log("WARN", msg, data)

    def error(self, msg, **data):
        self._log("ERROR", msg, data)
