"""
Change Gears - lathe change gear selection for cutting arbitrary thread pitches.

Searches every combination of the change gears on hand (optionally plus one
extra gear) for the trains that best approximate a desired thread pitch.

Example:
    >>> from changegears import load_config, RatioSolver
    >>>
    >>> config = load_config("myLathe.conf")
    >>> solver = RatioSolver(config)
    >>> best = solver.solve_available(1.25)
    >>> print(best[0].driving_gears, best[0].driven_gears)

Note: All imports are lazy-loaded so the CLI starts quickly.
"""

__version__ = "1.0.0"

# Define which names come from which submodule
# All imports are lazy to minimize startup time

_ENUMS = {"SolveMode", "OutputFormat"}

_SOLVER = {
    "RatioSolver",
    "RankedResults",
    "InvariantViolation",
    "compute_desired_ratio",
    "compute_actual_ratio",
    "compute_actual_pitch",
    "compute_error",
    "validate_config",
    "validate_pitch",
    "Severity",
    "ValidationResult",
    "to_json",
    "to_markdown",
    "to_summary",
}

_IO = {
    "load_config",
    "parse_config_text",
    "save_config_json",
    "SolverConfig",
    "SolveResult",
}

# Cache for lazy-loaded modules
_modules = {}


def __getattr__(name):
    """Lazy load submodules when their attributes are accessed."""
    if name in _ENUMS:
        if "enums" not in _modules:
            from . import enums
            _modules["enums"] = enums
        return getattr(_modules["enums"], name)

    if name in _SOLVER:
        if "solver" not in _modules:
            from . import solver
            _modules["solver"] = solver
        return getattr(_modules["solver"], name)

    if name in _IO:
        if "io" not in _modules:
            from . import io
            _modules["io"] = io
        return getattr(_modules["io"], name)

    raise AttributeError(f"module 'changegears' has no attribute {name!r}")


__all__ = [
    # Version
    "__version__",

    # Enums (lazy loaded from enums)
    "SolveMode",
    "OutputFormat",

    # Solver (lazy loaded from solver)
    "RatioSolver",
    "RankedResults",
    "InvariantViolation",
    "compute_desired_ratio",
    "compute_actual_ratio",
    "compute_actual_pitch",
    "compute_error",
    "validate_config",
    "validate_pitch",
    "Severity",
    "ValidationResult",
    "to_json",
    "to_markdown",
    "to_summary",

    # IO (lazy loaded from io)
    "load_config",
    "parse_config_text",
    "save_config_json",
    "SolverConfig",
    "SolveResult",
]
