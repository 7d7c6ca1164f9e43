"""
Change Gears IO - config models and loaders.

Example:
    >>> from changegears.io import load_config
    >>> config = load_config("myLathe.conf")
    >>> config.available_gears
    (20, 30, 40, 50, 60, 80, 100)
"""

from .loaders import (
    load_config,
    parse_config_text,
    save_config_json,
    SolverConfig,
    SolveResult,
    CONFIG_KEYS,
    CONFIG_KEY_FOR_FIELD,
)

__all__ = [
    # Loaders
    "load_config",
    "parse_config_text",
    "save_config_json",

    # Models
    "SolverConfig",
    "SolveResult",

    # Config file keys
    "CONFIG_KEYS",
    "CONFIG_KEY_FOR_FIELD",
]
