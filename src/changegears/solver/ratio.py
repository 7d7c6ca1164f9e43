"""
Change Gear Solver - Ratio and Pitch Error

Pure functions converting between gear train ratio and cut thread pitch.

Convention is ratio = driven gears / driving gears, so larger values
indicate a higher resulting number of threads per distance (finer pitch).

The lathe lead is expressed in rev/in (leadscrew threads per inch), so
MM_PER_INCH / lead is the leadscrew pitch in mm/rev.
"""

from dataclasses import dataclass
from math import prod
from typing import Optional, Sequence

from ..constants import INCHES_PER_FOOT, MM_PER_INCH
from ..io import SolveResult
from .combinatorics import InvariantViolation


@dataclass(frozen=True)
class ErrorMetrics:
    """Pitch error expressed four ways, all derived from error_mm_per_thread"""
    error_mm_per_thread: float
    error_percent: float
    error_inch_per_thread: float
    error_inch_per_foot: float

    @property
    def score(self) -> float:
        """Ranking score (lower is better)"""
        return abs(self.error_percent)


def compute_desired_ratio(desired_pitch_mm: float, lead: float) -> float:
    """Gear ratio that would cut exactly `desired_pitch_mm`."""
    lathe_pitch_mm = MM_PER_INCH / lead
    return lathe_pitch_mm / desired_pitch_mm


def compute_actual_ratio(driving_gears: Sequence[int], driven_gears: Sequence[int]) -> float:
    """
    Transmission ratio of a gear train.

    Args:
        driving_gears: Tooth counts of the driving gear in each stage
        driven_gears: Tooth counts of the driven gear in each stage

    Returns:
        product(driven_gears) / product(driving_gears)

    Raises:
        InvariantViolation: If the two sequences differ in length
    """
    if len(driving_gears) != len(driven_gears):
        raise InvariantViolation(
            f"driving/driven stage mismatch: {len(driving_gears)} driving, "
            f"{len(driven_gears)} driven"
        )
    return prod(driven_gears) / prod(driving_gears)


def compute_actual_pitch(ratio: float, lead: float) -> float:
    """Pitch (mm/thread) cut by a train with the given ratio."""
    return MM_PER_INCH / lead / ratio


def compute_error(desired_pitch_mm: float, actual_pitch_mm: float) -> ErrorMetrics:
    """
    Pitch error of an achieved pitch against the desired one.

    Positive errors mean the cut thread is coarser than requested.
    """
    error_mm = actual_pitch_mm - desired_pitch_mm
    error_inch = error_mm / MM_PER_INCH
    return ErrorMetrics(
        error_mm_per_thread=error_mm,
        error_percent=error_mm / desired_pitch_mm * 100.0,
        error_inch_per_thread=error_inch,
        error_inch_per_foot=error_inch / (desired_pitch_mm / MM_PER_INCH) * INCHES_PER_FOOT,
    )


def error_score(actual_ratio: float, desired_pitch_mm: float, lead: float) -> float:
    """
    Ranking score of a ratio: absolute percent pitch error.

    Bit-identical to compute_error(...).score for the same train, but lets
    the search loop reject candidates without building a result.
    """
    actual_pitch_mm = compute_actual_pitch(actual_ratio, lead)
    return abs((actual_pitch_mm - desired_pitch_mm) / desired_pitch_mm * 100.0)


def result_score(result: SolveResult) -> float:
    """Ranking score of a finished result."""
    return abs(result.error_percent)


def evaluate(
    driving_gears: Sequence[int],
    driven_gears: Sequence[int],
    desired_pitch_mm: float,
    lead: float,
    extra_gear_teeth: Optional[int] = None
) -> SolveResult:
    """Build a fully populated SolveResult for one gear train."""
    ratio = compute_actual_ratio(driving_gears, driven_gears)
    actual_pitch_mm = compute_actual_pitch(ratio, lead)
    errors = compute_error(desired_pitch_mm, actual_pitch_mm)

    return SolveResult(
        driving_gears=tuple(driving_gears),
        driven_gears=tuple(driven_gears),
        ratio=ratio,
        actual_pitch_mm=actual_pitch_mm,
        error_percent=errors.error_percent,
        error_mm_per_thread=errors.error_mm_per_thread,
        error_inch_per_thread=errors.error_inch_per_thread,
        error_inch_per_foot=errors.error_inch_per_foot,
        extra_gear_teeth=extra_gear_teeth,
    )
