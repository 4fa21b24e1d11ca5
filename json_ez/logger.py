from typing import NotRequired, TypedDict
import logging
from json_ez.utils import resolve_config


class LoggerConfig(TypedDict):
    name: NotRequired[str]
    is_enabled: NotRequired[bool]
    level: NotRequired[int]
    format: NotRequired[str]


class LoggerConfigRequired(TypedDict):
    name: str
    is_enabled: bool
    level: int
    format: str


DEFAULT_LOGGER_CONFIG: LoggerConfigRequired = {
    "name": "json_ez",
    "is_enabled": True,
    "level": logging.DEBUG,
    "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
}


class Logger:
    def __init__(self, config: LoggerConfig | None = None):
        self.config = resolve_config(config or {}, DEFAULT_LOGGER_CONFIG)
        self.logger = logging.getLogger(self.config["name"])
        self.set_configuration()

    def set_configuration(self):
        if not self.config["is_enabled"]:
            # An enabled instance owning the handler keeps the logger on.
            if not self._has_handler():
                self.logger.disabled = True
            return

        self.logger.disabled = False
        self.logger.setLevel(self.config["level"])
        if self._has_handler():
            return
        self.formatter = logging.Formatter(self.config["format"])
        self.ch = logging.StreamHandler()
        self.ch.json_ez_handler = True
        self.ch.setFormatter(self.formatter)
        self.logger.addHandler(self.ch)

    def _has_handler(self) -> bool:
        return any(getattr(handler, "json_ez_handler", False) for handler in self.logger.handlers)
