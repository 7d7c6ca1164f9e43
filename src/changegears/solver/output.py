"""Output formatters for change gear search results.

Converts ranked SolveResult lists to plain text, Markdown, and JSON.

Uses Pydantic's model_dump(mode='json') for serialization.
"""

import json
from typing import Dict, List, Optional, Sequence, TYPE_CHECKING

from ..enums import SolveMode
from ..io import SolveResult

if TYPE_CHECKING:
    from .validation import ValidationResult

SCHEMA_VERSION = "1.0"

_MODE_TITLES = {
    SolveMode.AVAILABLE: "Using only available gear options",
    SolveMode.PLUS: "Using available gears plus one extra gear",
}


def mode_title(mode: SolveMode, max_gear_teeth: Optional[int] = None) -> str:
    """Heading used for a block of results."""
    if mode == SolveMode.PLUS and max_gear_teeth is not None:
        return f"Using available gears plus one extra gear up to {max_gear_teeth} teeth"
    return _MODE_TITLES.get(mode, mode.value)


def _gear_list(gears: Sequence[int]) -> str:
    return ", ".join(str(g) for g in gears)


def to_summary(
    results: List[SolveResult],
    desired_pitch_mm: float,
    title: Optional[str] = None
) -> str:
    """Convert ranked results to a plain text report.

    Args:
        results: Ranked results, best first
        desired_pitch_mm: Requested pitch the results were scored against
        title: Optional heading line

    Returns:
        Multi-line formatted summary string
    """
    lines = []
    if title:
        lines.extend([f"═══ {title} ═══", ""])

    lines.append(f"Desired pitch = {desired_pitch_mm:g} mm/thread")

    if not results:
        lines.extend(["", "No gear combinations found."])
        return "\n".join(lines)

    for rank, r in enumerate(results, start=1):
        lines.extend([
            "",
            f"#{rank}: Actual achieved pitch = {r.actual_pitch_mm:.6f} mm/thread",
            "",
            "  Driving gears:",
        ])
        lines.extend(f"    {t}" for t in r.driving_gears)
        lines.extend(["", "  Driven gears:"])
        lines.extend(f"    {t}" for t in r.driven_gears)
        if r.extra_gear_teeth is not None:
            lines.extend(["", f"  Extra gear needed: {r.extra_gear_teeth} teeth"])
        lines.extend([
            "",
            f"  Percent Error = {r.error_percent:.6g}",
            f"  Error (mm/thread) = {r.error_mm_per_thread:.6g}",
            f"  Error (in/thread) = {r.error_inch_per_thread:.6g}",
            f"  Error (in/ft) = {r.error_inch_per_foot:.6g}",
        ])

    return "\n".join(lines)


def to_markdown(
    results: List[SolveResult],
    desired_pitch_mm: float,
    title: Optional[str] = None
) -> str:
    """Convert ranked results to a Markdown table."""
    md = f"## {title}\n\n" if title else ""
    md += f"**Desired pitch:** {desired_pitch_mm:g} mm/thread\n\n"

    if not results:
        md += "*No gear combinations found.*\n"
        return md

    md += "| Rank | Driving | Driven | Extra Gear | Pitch (mm) | Error (%) | Error (in/ft) |\n"
    md += "|------|---------|--------|------------|------------|-----------|---------------|\n"
    for rank, r in enumerate(results, start=1):
        extra = f"{r.extra_gear_teeth}T" if r.extra_gear_teeth is not None else "-"
        md += (
            f"| {rank} | {_gear_list(r.driving_gears)} | {_gear_list(r.driven_gears)} | "
            f"{extra} | {r.actual_pitch_mm:.6f} | {r.error_percent:.4f} | "
            f"{r.error_inch_per_foot:.6f} |\n"
        )

    return md


def to_json(
    results_by_mode: Dict[SolveMode, List[SolveResult]],
    desired_pitch_mm: float,
    validation: Optional["ValidationResult"] = None,
    indent: int = 2
) -> str:
    """Convert ranked results for one or more search modes to JSON.

    Args:
        results_by_mode: Ranked results keyed by the search mode that found them
        desired_pitch_mm: Requested pitch
        validation: Optional config validation results to include
        indent: JSON indentation level (default: 2)

    Returns:
        JSON string with schema version, query, and results per mode
    """
    data = {
        "schema_version": SCHEMA_VERSION,
        "desired_pitch_mm": desired_pitch_mm,
        "results": {
            mode.value: [r.model_dump(mode='json') for r in results]
            for mode, results in results_by_mode.items()
        },
    }

    if validation:
        data["validation"] = {
            "valid": validation.valid,
            "messages": [
                {
                    "severity": msg.severity.value,
                    "code": msg.code,
                    "message": msg.message,
                    "suggestion": msg.suggestion,
                }
                for msg in validation.messages
            ],
        }

    return json.dumps(data, indent=indent)
