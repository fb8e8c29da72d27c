import json
import os
from pathlib import Path

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"
CONFIG_ENV = "ID57_CONFIG"


class IdentifierConfig:
    __slots__ = ("strict", "entropy")

    def __init__(self, strict=False, entropy="uuid4"):
        if not isinstance(strict, bool):
            raise ValueError(f"identifier.strict must be true or false, got {strict!r}")
        self.strict = strict
        self.entropy = entropy


class LoggingConfig:
    __slots__ = ("level", "crash_file")

    def __init__(self, level="INFO", crash_file="logs/crash.log"):
        self.level = level
        self.crash_file = crash_file


class Config:
    __slots__ = ("identifier", "logging")

    def __init__(self, identifier=None, logging=None):
        self.identifier = identifier or IdentifierConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            IdentifierConfig(**d.get("identifier", {})),
            LoggingConfig(**d.get("logging", {})),
        )


def load_config(path=None):
    if path is None:
        path = os.environ.get(CONFIG_ENV)
    config_path = Path(path) if path else _DEFAULT_CONFIG

    if not config_path.exists():
        return Config()

    with open(config_path) as file:
        return Config.from_dict(json.load(file))
