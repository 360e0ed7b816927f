"""
Utility functions for rotorkit.

Includes configuration management.
"""

from .config import (
    Config,
    get_config,
    set_config,
    config_override,
    load_config,
    save_config,
)

__all__ = [
    "Config",
    "get_config",
    "set_config",
    "config_override",
    "load_config",
    "save_config",
]
