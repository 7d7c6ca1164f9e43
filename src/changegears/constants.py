"""
Numerical constants for change gear calculations.

Always include units in constant names (_MM, _PERCENT) where they apply.

Constants are grouped by category:
- Unit conversion
- Mechanical limits
- Config defaults
- Search limits
"""

# =============================================================================
# Unit Conversion
# =============================================================================

MM_PER_INCH: float = 25.4

INCHES_PER_FOOT: float = 12.0

# =============================================================================
# Mechanical Limits
# =============================================================================

# Smallest gear considered when synthesizing an extra gear for the
# "available plus one" search.  Not configurable.
MIN_SYNTHETIC_GEAR_TEETH: int = 16

# =============================================================================
# Config Defaults (applied when a key is missing from the config file)
# =============================================================================

DEFAULT_MAX_REDUCTIONS: int = 0  # Must be supplied by the user
DEFAULT_MAX_GEAR_TEETH: int = 120
DEFAULT_LEAD: float = 0.0  # Must be supplied by the user
DEFAULT_SHOW_BEST_COUNT: int = 10

# =============================================================================
# Search Limits
# =============================================================================

# Score held by an empty ranking slot.  Any real candidate beats it.
SENTINEL_SCORE: float = float("inf")

# Candidate count above which validation warns that the search will be slow
LARGE_SEARCH_WARNING_CANDIDATES: int = 50_000_000
