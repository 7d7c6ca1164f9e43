"""Type-safe enums for the change gear solver."""

from enum import Enum


class SolveMode(Enum):
    """Which gear inventory the search is allowed to draw from"""
    AVAILABLE = "available"  # Only gears listed in the config
    PLUS = "plus"  # Config gears plus one synthesized gear
    BOTH = "both"  # Run both searches (CLI default)


class OutputFormat(Enum):
    """Result presentation format"""
    SUMMARY = "summary"
    MARKDOWN = "markdown"
    JSON = "json"
