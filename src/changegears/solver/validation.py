"""
Change Gear Solver - Validation Rules

Checks a SolverConfig and a requested pitch before a search is run.  The
solver itself assumes valid input, so anything that would make a search
meaningless is reported here as an error.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from ..constants import LARGE_SEARCH_WARNING_CANDIDATES, MIN_SYNTHETIC_GEAR_TEETH, MM_PER_INCH
from ..io import SolverConfig, CONFIG_KEY_FOR_FIELD
from .core import estimate_candidate_count


class Severity(Enum):
    """Validation message severity"""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationMessage:
    """A single validation finding"""
    severity: Severity
    code: str
    message: str
    suggestion: Optional[str] = None


@dataclass
class ValidationResult:
    """Complete validation result"""
    valid: bool  # True if no errors
    messages: List[ValidationMessage] = field(default_factory=list)

    @property
    def errors(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.WARNING]

    @property
    def infos(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.INFO]


def validate_config(config: SolverConfig) -> ValidationResult:
    """
    Validate a solver configuration.

    Args:
        config: Loaded SolverConfig

    Returns:
        ValidationResult with all findings
    """
    messages: List[ValidationMessage] = []

    messages.extend(_validate_required(config))
    messages.extend(_validate_inventory(config))
    messages.extend(_validate_max_teeth(config))

    # Search size only makes sense once the basics are in place
    if not any(m.severity == Severity.ERROR for m in messages):
        messages.extend(_validate_search_space(config))

    has_errors = any(m.severity == Severity.ERROR for m in messages)

    return ValidationResult(
        valid=not has_errors,
        messages=messages
    )


def validate_pitch(desired_pitch_mm: float) -> ValidationResult:
    """Check that a requested thread pitch is finite and strictly positive."""
    messages = []
    if not desired_pitch_mm > 0.0:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="PITCH_INVALID",
            message=f"Desired pitch must be strictly positive, got {desired_pitch_mm}",
        ))
    elif not (math.isfinite(desired_pitch_mm) and math.isfinite(MM_PER_INCH / desired_pitch_mm)):
        # Threads per inch must also be representable
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="PITCH_INVALID",
            message=f"Desired pitch {desired_pitch_mm} mm is out of range",
            suggestion="Use a finite pitch such as 1.25 (mm) or 13 (TPI)"
        ))
    return ValidationResult(valid=not messages, messages=messages)


def _key(field_name: str) -> str:
    return CONFIG_KEY_FOR_FIELD[field_name]


def _validate_required(config: SolverConfig) -> List[ValidationMessage]:
    """Fields the config file must set to positive values"""
    messages = []

    if config.max_reductions <= 0:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="MAX_REDUCTIONS_INVALID",
            message=f"{_key('max_reductions')} must be specified and must be greater than zero",
            suggestion="Most lathes use 1 or 2 reductions (2 or 4 change gears)"
        ))

    if config.lead <= 0.0:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="LEAD_INVALID",
            message=f"{_key('lead')} must be specified and must be greater than zero",
            suggestion="Use the leadscrew threads per inch, e.g. LEAD = 8"
        ))

    if config.show_best_count <= 0:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="SHOW_TOP_INVALID",
            message=f"{_key('show_best_count')} must be greater than zero",
        ))

    return messages


def _validate_inventory(config: SolverConfig) -> List[ValidationMessage]:
    """Check the gear inventory can form trains at all"""
    messages = []
    num_gears = len(config.available_gears)

    if num_gears == 0:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="NO_GEARS",
            message=f"No gears listed; add at least one {_key('available_gears')} entry",
        ))
        return messages

    if num_gears < 2:
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="INVENTORY_TOO_SMALL",
            message=f"Only {num_gears} gear listed - searching available gears alone finds nothing",
            suggestion="Only the available-plus-one search will produce results"
        ))

    if config.max_reductions > 0 and 2 * config.max_reductions > num_gears:
        available_cap = min(config.max_reductions, num_gears // 2)
        plus_cap = min(config.max_reductions, (num_gears + 1) // 2)
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="REDUCTIONS_EXCEED_INVENTORY",
            message=(
                f"{_key('max_reductions')} = {config.max_reductions} needs "
                f"{2 * config.max_reductions} gears but only {num_gears} are listed"
            ),
            suggestion=(
                f"Available-gear search will use at most {available_cap} reduction(s), "
                f"available-plus-one search at most {plus_cap}"
            )
        ))

    return messages


def _validate_max_teeth(config: SolverConfig) -> List[ValidationMessage]:
    messages = []
    if config.max_gear_teeth < MIN_SYNTHETIC_GEAR_TEETH:
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="MAX_TEETH_BELOW_MINIMUM",
            message=(
                f"{_key('max_gear_teeth')} = {config.max_gear_teeth} is below the "
                f"{MIN_SYNTHETIC_GEAR_TEETH}T minimum for an extra gear"
            ),
            suggestion="The available-plus-one search will not try any extra gear"
        ))
    return messages


def _validate_search_space(config: SolverConfig) -> List[ValidationMessage]:
    """Estimate how many gear trains the searches will evaluate"""
    num_gears = len(config.available_gears)
    available = estimate_candidate_count(num_gears, config.max_reductions)
    extra_sizes = max(0, config.max_gear_teeth - MIN_SYNTHETIC_GEAR_TEETH + 1)
    plus = extra_sizes * estimate_candidate_count(num_gears + 1, config.max_reductions)

    messages = [ValidationMessage(
        severity=Severity.INFO,
        code="SEARCH_SPACE",
        message=(
            f"Search will evaluate {available:,} gear trains from the available gears "
            f"and {plus:,} with one extra gear"
        ),
    )]

    if max(available, plus) > LARGE_SEARCH_WARNING_CANDIDATES:
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="LARGE_SEARCH_SPACE",
            message=f"Search space is very large ({max(available, plus):,} gear trains); expect a long run",
            suggestion=f"Reduce {_key('max_reductions')} or {_key('max_gear_teeth')}"
        ))

    return messages
