"""
Change Gear Solver - exhaustive search for lathe change gear trains.

Example:
    >>> from changegears.io import load_config
    >>> from changegears.solver import RatioSolver, validate_config
    >>>
    >>> config = load_config("myLathe.conf")
    >>> assert validate_config(config).valid
    >>>
    >>> solver = RatioSolver(config)
    >>> for result in solver.solve_available(1.25):
    ...     print(result.driving_gears, result.driven_gears, result.error_percent)
"""

from .combinatorics import (
    # Enumeration
    Combinations,
    count_combinations,
    generate_combinations,
    split_positions,
    partition_subset,
    remaining_set,
    InvariantViolation,
)

from .ratio import (
    # Ratio / pitch conversion
    ErrorMetrics,
    compute_desired_ratio,
    compute_actual_ratio,
    compute_actual_pitch,
    compute_error,
    error_score,
    evaluate,
)

from .ranking import RankedResults

from .core import (
    # Search driver
    RatioSolver,
    estimate_candidate_count,
    usable_reductions,
)

from .validation import (
    # Validation
    validate_config,
    validate_pitch,
    Severity,
    ValidationMessage,
    ValidationResult,
)

from .output import (
    # Output formatters
    to_json,
    to_markdown,
    to_summary,
    mode_title,
)

from ..enums import SolveMode, OutputFormat

# Convenience imports
from ..io import SolverConfig, SolveResult


__all__ = [
    # Enums
    "SolveMode",
    "OutputFormat",

    # Models
    "SolverConfig",
    "SolveResult",

    # Enumeration
    "Combinations",
    "count_combinations",
    "generate_combinations",
    "split_positions",
    "partition_subset",
    "remaining_set",
    "InvariantViolation",

    # Ratio / pitch conversion
    "ErrorMetrics",
    "compute_desired_ratio",
    "compute_actual_ratio",
    "compute_actual_pitch",
    "compute_error",
    "error_score",
    "evaluate",

    # Ranking
    "RankedResults",

    # Search driver
    "RatioSolver",
    "estimate_candidate_count",
    "usable_reductions",

    # Validation
    "validate_config",
    "validate_pitch",
    "Severity",
    "ValidationMessage",
    "ValidationResult",

    # Output formatters
    "to_json",
    "to_markdown",
    "to_summary",
    "mode_title",
]
