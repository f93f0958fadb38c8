"""Configuration model for music catalog."""

import json
import logging
from dataclasses import dataclass, field, fields, is_dataclass, asdict
from pathlib import Path
from typing import Any, Dict

from ..domain.catalog.repositories import NO_ARTIST_FOUND, NO_SONG_FOUND
from ..exceptions import ConfigurationError


@dataclass
class SentinelConfig:
    """Answers given by the popularity queries on an empty catalog."""
    no_artist: str = NO_ARTIST_FOUND
    no_song: str = NO_SONG_FOUND


@dataclass
class LikesConfig:
    """Configuration for like bookkeeping."""
    propagate_to_artist: bool = True  # a new song like also counts for its artist


@dataclass
class LoggingConfig:
    level: str = "WARNING"
    rich_tracebacks: bool = True


@dataclass
class EventsConfig:
    history_limit: int = 1000


@dataclass
class CatalogConfig:
    """Main configuration model."""
    sentinels: SentinelConfig = field(default_factory=SentinelConfig)
    likes: LikesConfig = field(default_factory=LikesConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    events: EventsConfig = field(default_factory=EventsConfig)

    @classmethod
    def default(cls) -> "CatalogConfig":
        return cls()

    def validate(self) -> None:
        """Raise ConfigurationError for values the catalog cannot use."""
        if not isinstance(logging.getLevelName(self.logging.level.upper()), int):
            raise ConfigurationError(f"Unknown log level: {self.logging.level}")
        if self.events.history_limit <= 0:
            raise ConfigurationError("events.history_limit must be positive")


def _dict_to_dataclass(data: Any, dataclass_type, path: str = ""):
    """Convert dict to dataclass recursively, rejecting unknown keys."""
    if not isinstance(data, dict):
        raise ConfigurationError(f"Expected an object at '{path or 'root'}'")

    field_types = {f.name: f.type for f in fields(dataclass_type)}
    unknown = set(data) - set(field_types)
    if unknown:
        location = path or "root"
        raise ConfigurationError(f"Unknown configuration keys at '{location}': {', '.join(sorted(unknown))}")

    kwargs = {}
    for field_name, field_type in field_types.items():
        if field_name not in data:
            continue
        value = data[field_name]
        child_path = f"{path}.{field_name}" if path else field_name
        if is_dataclass(field_type):
            kwargs[field_name] = _dict_to_dataclass(value, field_type, child_path)
        else:
            expected = {"str": str, "bool": bool, "int": int}.get(getattr(field_type, "__name__", field_type))
            if expected is not None and (
                not isinstance(value, expected) or (expected is int and isinstance(value, bool))
            ):
                raise ConfigurationError(f"'{child_path}' must be of type {expected.__name__}")
            kwargs[field_name] = value

    return dataclass_type(**kwargs)


def config_from_dict(data: Dict[str, Any]) -> CatalogConfig:
    config = _dict_to_dataclass(data, CatalogConfig)
    config.validate()
    return config


def load_config(config_path: Path) -> CatalogConfig:
    """Load configuration from JSON file."""
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {config_path}: {e.msg} at line {e.lineno}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read {config_path}: {e}") from e

    return config_from_dict(config_data)


def save_config(config: CatalogConfig, config_path: Path) -> None:
    """Save configuration to JSON file."""
    with open(config_path, 'w', encoding='utf-8') as f:
        json.dump(asdict(config), f, indent=2)


def create_default_config(config_path: Path) -> None:
    """Create a default configuration file."""
    save_config(CatalogConfig.default(), config_path)
