"""Configuration for the action items synchronizer: marker, heading and bullet literals plus throttle tunables."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional, Union

import yaml

from action_items.exceptions import ConfigError


@dataclass
class Config:
    """Marker, section and throttle settings shared by every component"""
    marker_prefix: str = "//"  # Trimmed lines starting with this are action items
    heading: str = "# Action Items"  # Sentinel line opening the managed section
    bullet_prefix: str = "- "  # Prefix of each summary entry
    throttle_ms: int = 500  # Minimum spacing between non-targeted rescans
    near_start_columns: int = 10  # Edits at or before this column may be a marker being typed

    def __post_init__(self):
        for name in ('marker_prefix', 'heading', 'bullet_prefix'):
            if not isinstance(getattr(self, name), str):
                raise ConfigError(f"{name} must be a string: {getattr(self, name)!r}")
        if not self.marker_prefix or self.marker_prefix != self.marker_prefix.strip():
            raise ConfigError(f"marker_prefix must be non-empty without surrounding whitespace: {self.marker_prefix!r}")
        if not self.heading.strip():
            raise ConfigError("heading must not be blank")
        if not self.bullet_prefix.strip():
            raise ConfigError(f"bullet_prefix must not be blank: {self.bullet_prefix!r}")
        for name in ('throttle_ms', 'near_start_columns'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ConfigError(f"{name} must be a non-negative integer: {value!r}")

    @property
    def throttle_seconds(self) -> float:
        return self.throttle_ms / 1000.0


def load_config(path: Optional[Union[str, Path]]) -> Config:
    """Load a Config from a YAML mapping.

    A missing path or an empty file yields the defaults. Unknown keys and
    non-mapping documents raise ConfigError.
    """
    if path is None:
        return Config()
    path = Path(path)
    if not path.exists():
        return Config()

    try:
        with open(path, encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse {path}: {e}")

    if data is None:
        return Config()
    if not isinstance(data, dict):
        raise ConfigError(f"{path} must contain a mapping, got {type(data).__name__}")

    known = {f.name for f in fields(Config)}
    unknown = sorted(str(key) for key in set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown configuration keys in {path}: {', '.join(unknown)}")
    return Config(**data)
