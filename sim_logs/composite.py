from sim_logs.base import Logger

class CompositeLogger(Logger):
    """Fans every event out to each wrapped logger."""

    def __init__(self, *loggers: Logger):
        self.loggers = loggers

    def _emit(self, method, msg, data):
        for logger in self.loggers:
            getattr(logger, method)(msg, **data)

    def info(self, msg, **data):
        self._emit("info", msg, data)

    def debug(self, msg, **data):
        self._emit("debug", msg, data)

    def warning(self, msg, **data):
        self._emit("warning", msg, data)

    def error(self, msg, **data):
        self._emit("error", msg, data)
