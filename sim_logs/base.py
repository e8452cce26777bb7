from abc import ABC, abstractmethod

# fields that say which opening or card an event is about
CONTEXT_FIELDS = ("mode", "archetype", "card_id")


def split_context(data: dict):
    """Separate the opening context (mode, archetype, card_id) from the other event fields."""
    context = {k: data[k] for k in CONTEXT_FIELDS if data.get(k) is not None}
    rest = {k: v for k, v in data.items() if k not in context}
    return context, rest


class Logger(ABC):
    """Event logger: `msg` is a snake_case event name, `data` its fields."""

    @abstractmethod
    def info(self, msg: str, **data): ...

    @abstractmethod
    def debug(self, msg: str, **data): ...

    @abstractmethod
    def warning(self, msg: str, **data): ...

    @abstractmethod
    def error(self, msg: str, **data): ...
