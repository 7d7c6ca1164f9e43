"""
Config input and result models for the change gear solver.

Loads solver configuration from either the plain ``KEY = value`` config
file format or JSON. Uses Pydantic for automatic validation and coercion.
"""

import json
import logging
import re
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..constants import (
    DEFAULT_LEAD,
    DEFAULT_MAX_GEAR_TEETH,
    DEFAULT_MAX_REDUCTIONS,
    DEFAULT_SHOW_BEST_COUNT,
)

logger = logging.getLogger(__name__)


class SolverConfig(BaseModel):
    """Lathe and gear inventory parameters for one solver instance."""
    available_gears: Tuple[int, ...] = ()
    max_reductions: int = Field(DEFAULT_MAX_REDUCTIONS, ge=0)  # max selected gears = 2 * max_reductions
    max_gear_teeth: int = Field(DEFAULT_MAX_GEAR_TEETH, ge=0)
    lead: float = DEFAULT_LEAD  # [rev/in]
    show_best_count: int = Field(DEFAULT_SHOW_BEST_COUNT, ge=0)

    model_config = ConfigDict(extra='ignore', frozen=True)

    @field_validator('available_gears')
    @classmethod
    def check_gears_positive(cls, v):
        bad = [g for g in v if g <= 0]
        if bad:
            raise ValueError(f"gear tooth counts must be positive, got {bad}")
        return v


class SolveResult(BaseModel):
    """One ranked gear train with its achieved pitch and error metrics."""
    driving_gears: Tuple[int, ...]
    driven_gears: Tuple[int, ...]
    ratio: float  # driven / driving
    actual_pitch_mm: float
    error_percent: float
    error_mm_per_thread: float
    error_inch_per_thread: float
    error_inch_per_foot: float
    extra_gear_teeth: Optional[int] = None  # Synthesized gear used by this train, if any

    model_config = ConfigDict(extra='ignore', frozen=True)

    @property
    def num_reductions(self) -> int:
        return len(self.driving_gears)


# Config file keys, matched case-insensitively
CONFIG_KEYS: Dict[str, str] = {
    "GEAR": "available_gears",
    "MAX_REDUCTIONS": "max_reductions",
    "MAX_TEETH": "max_gear_teeth",
    "LEAD": "lead",
    "SHOW_TOP": "show_best_count",
}

# Reverse lookup for error messages (field name -> file key)
CONFIG_KEY_FOR_FIELD: Dict[str, str] = {v: k for k, v in CONFIG_KEYS.items()}

_LIST_SEPARATOR = re.compile(r"[,\s]+")


def parse_config_text(text: str, source: str = "<config>") -> SolverConfig:
    """
    Parse ``KEY = value`` config text.

    Rules:
    - ``#`` starts a comment; blank lines are ignored
    - Keys are case-insensitive
    - ``GEAR`` may be repeated and may hold a comma/space separated list
    - Unknown keys are logged and ignored

    Args:
        text: Config file contents
        source: Name used in error messages

    Returns:
        SolverConfig (not yet checked with validate_config)

    Raises:
        ValueError: If a line is malformed or a value cannot be parsed
    """
    gears: List[int] = []
    values: Dict[str, Union[int, float]] = {}

    for line_no, raw_line in enumerate(text.splitlines(), start=1):
        line = raw_line.split('#', 1)[0].strip()
        if not line:
            continue

        if '=' not in line:
            raise ValueError(f"{source}:{line_no}: expected 'KEY = value', got {raw_line.strip()!r}")

        key, value = (part.strip() for part in line.split('=', 1))
        key = key.upper()
        if not value:
            raise ValueError(f"{source}:{line_no}: missing value for {key}")

        field_name = CONFIG_KEYS.get(key)
        if field_name is None:
            logger.warning(f"{source}:{line_no}: ignoring unknown config key {key!r}")
            continue

        try:
            if field_name == "available_gears":
                gears.extend(int(tok) for tok in _LIST_SEPARATOR.split(value) if tok)
            elif field_name == "lead":
                values[field_name] = float(value)
            else:
                values[field_name] = int(value)
        except ValueError:
            raise ValueError(f"{source}:{line_no}: invalid value for {key}: {value!r}") from None

    if gears:
        values["available_gears"] = tuple(gears)

    return SolverConfig.model_validate(values)


def load_config(filepath: Union[str, Path]) -> SolverConfig:
    """
    Load solver configuration from a file.

    Files ending in ``.json`` are read as JSON using the model field names;
    anything else is read in ``KEY = value`` format.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If the file is malformed
        ValidationError: If a value has the wrong type
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"Config file not found: {filepath}")

    if filepath.suffix.lower() == '.json':
        with open(filepath, 'r') as f:
            data = json.load(f)
        return SolverConfig.model_validate(data)

    return parse_config_text(filepath.read_text(), source=str(filepath))


def save_config_json(config: SolverConfig, filepath: Union[str, Path]) -> None:
    """Save solver configuration as JSON (readable again by load_config)."""
    filepath = Path(filepath)

    with open(filepath, 'w') as f:
        json.dump(config.model_dump(mode='json'), f, indent=2)
