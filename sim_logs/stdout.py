from sim_logs.base import Logger, split_context
from datetime import datetime, timezone

class StdoutLogger(Logger):
    """One line per event; context fields are shown as `key=value` after the event name."""

    def __init__(self, log_type="server"):
        self.log_type = log_type

    def _log(self, level, msg, data):
        ts = datetime.now(timezone.utc).isoformat()
        context, rest = split_context(data)
        tags = "".join(f" {k}={v}" for k, v in context.items())
        print(f"[{ts}] [{self.log_type}] {level} {msg}{tags} {rest}")

    def info(self, msg, **data):
        self._log("INFO", msg, data)

    def debug(self, msg, **data):
        self._log("DEBUG", msg, data)

    def warning(self, msg, **data):
        self._log("WARN", msg, data)

    def error(self, msg, **data):
        self._log("ERROR", msg, data)
