from typing import Any, NotRequired, TextIO, TypedDict
import logging
from scripts.shapes.utils import resolve_config


class LoggerConfig(TypedDict):
    name: NotRequired[str]
    is_enabled: NotRequired[bool]
    level: NotRequired[int]
    format: NotRequired[str]
    stream: NotRequired[TextIO | None]


class LoggerConfigRequired(TypedDict):
    name: str
    is_enabled: bool
    level: int
    format: str
    stream: TextIO | None


DEFAULT_LOGGER_CONFIG: LoggerConfigRequired = {
    "name": "Schema Builder",
    "is_enabled": True,
    "level": logging.DEBUG,
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    "stream": None,
}


def describe_node(node: Any) -> str:
    """Short label for log messages.

    Never calls ``str()`` on the node: titled nodes mint a reference token
    when converted to text.
    """
    if isinstance(node, list) and node and isinstance(node[0], str):
        title = node[1].get("title") if len(node) > 1 and isinstance(node[1], dict) else None
        return f"{node[0]} schema '{title}'" if title else f"{node[0]} schema"
    return type(node).__name__


class Logger:
    def __init__(self, config: LoggerConfig | None = None):
        self.config = resolve_config(config or {}, DEFAULT_LOGGER_CONFIG)
        self.set_configuration()

    def set_configuration(self):
        if not self.config["is_enabled"]:
            # unregistered: the named logger shared with other wrappers is left as it is
            self.logger = logging.Logger(self.config["name"])
            self.logger.disabled = True
            return

        self.logger = logging.getLogger(self.config["name"])
        self.logger.setLevel(self.config["level"])
        if not any(getattr(handler, "_shapes_handler", False) for handler in self.logger.handlers):
            self._attach_handler()

    def _attach_handler(self):
        handler = logging.StreamHandler(self.config["stream"])
        handler.setFormatter(logging.Formatter(self.config["format"]))
        # one handler per logger name, however many builders share it
        handler._shapes_handler = True
        self.logger.addHandler(handler)
