"""
Configuration management for rotorkit.

Provides the configuration dataclass, JSON persistence, and the process-wide
active configuration read by the contract checks and rotor construction.
"""

import json
import logging
from contextlib import contextmanager
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Iterator
from pathlib import Path

from ..core.constants import DEFAULT_UNIT_TOLERANCE, DEFAULT_ANTIPARALLEL_TOLERANCE

logger = logging.getLogger(__name__)


@dataclass
class Config:
    """
    Configuration for rotorkit.

    Attributes:
        check_contracts: Run debug precondition checks (unit inputs, non-zero
            vectors). Has no effect under ``python -O``.
        unit_tolerance: Allowed |magnitude - 1| for vectors required to be unit
        antiparallel_tolerance: Half-width of the window around a.b == -1 in
            which Rotor3.from_vectors_exact uses the perpendicular fallback
    """

    check_contracts: bool = True
    unit_tolerance: float = DEFAULT_UNIT_TOLERANCE
    antiparallel_tolerance: float = DEFAULT_ANTIPARALLEL_TOLERANCE

    # Additional fields
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        # Extract known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        known_kwargs = {k: v for k, v in config_dict.items() if k in known_fields and k != 'extra'}
        extra_kwargs = {k: v for k, v in config_dict.items() if k not in known_fields}
        extra_kwargs.update(config_dict.get('extra') or {})

        config = cls(**known_kwargs)
        config.extra = extra_kwargs
        return config

    def update(self, **kwargs) -> 'Config':
        """Return a new config with updated values."""
        config_dict = self.to_dict()
        config_dict.update(kwargs)
        return Config.from_dict(config_dict)


_active_config = Config()


def get_config() -> Config:
    """Return the configuration currently in effect."""
    return _active_config


def set_config(config: Config) -> None:
    """Replace the configuration currently in effect."""
    global _active_config
    _active_config = config


@contextmanager
def config_override(**kwargs) -> Iterator[Config]:
    """
    Temporarily run with updated configuration values.

    Example:
        >>> with config_override(check_contracts=False):
        ...     Vector3.zero().perpendicular()
    """
    previous = get_config()
    set_config(previous.update(**kwargs))
    try:
        yield get_config()
    finally:
        set_config(previous)


def load_config(filepath: str) -> Config:
    """
    Load configuration from JSON file.

    Args:
        filepath: Path to JSON config file

    Returns:
        Config object
    """
    filepath = Path(filepath)
    with open(filepath, 'r') as f:
        config_dict = json.load(f)
    logger.info(f"Loaded config from {filepath}")
    return Config.from_dict(config_dict)


def save_config(config: Config, filepath: str) -> None:
    """
    Save configuration to JSON file.

    Args:
        config: Config object to save
        filepath: Output file path
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    with open(filepath, 'w') as f:
        json.dump(config.to_dict(), f, indent=2)
    logger.info(f"Saved config to {filepath}")
