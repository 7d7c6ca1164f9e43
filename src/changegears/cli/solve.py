"""
Command-line interface for change gear selection.
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from ..constants import MM_PER_INCH
from ..enums import OutputFormat, SolveMode
from ..io.loaders import load_config
from ..solver.core import RatioSolver
from ..solver.output import mode_title, to_json, to_markdown, to_summary
from ..solver.validation import Severity, validate_config, validate_pitch


def _print_messages(validation, file=None):
    file = file or sys.stderr
    for msg in validation.messages:
        if msg.severity == Severity.INFO:
            continue
        print(f"{msg.severity.value.upper()}: {msg.message}", file=file)
        if msg.suggestion:
            print(f"  Suggestion: {msg.suggestion}", file=file)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="changegears",
        description="Find lathe change gear combinations that cut a desired thread pitch",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Best trains for a 1.25 mm metric thread, from gears on hand and with one extra gear
  changegears myLathe.conf --mm 1.25

  # Only consider the gears listed in the config
  changegears myLathe.conf --mm 1.5 --mode available

  # Inch thread by threads-per-inch, top 3 as a Markdown table
  changegears myLathe.conf --tpi 13 --top 3 --format markdown

Config file format (one KEY = value per line, # starts a comment):
  GEAR = 20
  GEAR = 30, 40, 50      # GEAR may be repeated or hold a list
  MAX_REDUCTIONS = 2     # Max driving/driven pairs in series
  MAX_TEETH = 120        # Largest extra gear to try (default 120)
  LEAD = 8               # Leadscrew threads per inch
  SHOW_TOP = 10          # Number of results to show (default 10)
        """
    )

    parser.add_argument(
        'config_file',
        type=str,
        help='Lathe config file (KEY = value format, or .json)'
    )

    pitch = parser.add_mutually_exclusive_group(required=True)
    pitch.add_argument(
        '--mm',
        type=float,
        help='Desired thread pitch in mm/thread'
    )
    pitch.add_argument(
        '--tpi',
        type=float,
        help='Desired thread pitch in threads per inch'
    )

    parser.add_argument(
        '--mode',
        choices=[m.value for m in SolveMode],
        default=SolveMode.BOTH.value,
        help='Gear inventory to search (default: both)'
    )

    parser.add_argument(
        '--format',
        choices=[f.value for f in OutputFormat],
        default=OutputFormat.SUMMARY.value,
        help='Output format (default: summary)'
    )

    parser.add_argument(
        '--top',
        type=int,
        default=None,
        help='Number of results to show (overrides SHOW_TOP)'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='count',
        default=0,
        help='Log search progress (-v for info, -vv for debug)'
    )

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    # Desired pitch
    if args.tpi is not None:
        if not args.tpi > 0.0:
            print("Error: threads per inch must be strictly positive", file=sys.stderr)
            return 1
        desired_pitch_mm = MM_PER_INCH / args.tpi
    else:
        desired_pitch_mm = args.mm

    pitch_check = validate_pitch(desired_pitch_mm)
    if not pitch_check.valid:
        _print_messages(pitch_check)
        return 1

    # Load and check config
    try:
        config = load_config(args.config_file)
    except (OSError, ValueError, ValidationError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    if args.top is not None:
        config = config.model_copy(update={"show_best_count": args.top})

    validation = validate_config(config)
    _print_messages(validation)
    if not validation.valid:
        return 1

    # Search
    mode = SolveMode(args.mode)
    solver = RatioSolver(config)
    results_by_mode = {}

    if mode == SolveMode.AVAILABLE or (mode == SolveMode.BOTH and len(config.available_gears) > 1):
        results_by_mode[SolveMode.AVAILABLE] = solver.solve_available(desired_pitch_mm)

    if mode in (SolveMode.PLUS, SolveMode.BOTH):
        results_by_mode[SolveMode.PLUS] = solver.solve_available_plus(desired_pitch_mm)

    # Report
    output_format = OutputFormat(args.format)
    if output_format == OutputFormat.JSON:
        print(to_json(results_by_mode, desired_pitch_mm, validation=validation))
        return 0

    formatter = to_markdown if output_format == OutputFormat.MARKDOWN else to_summary
    blocks = [
        formatter(results, desired_pitch_mm, title=mode_title(m, config.max_gear_teeth))
        for m, results in results_by_mode.items()
    ]
    print("\n\n".join(blocks))

    return 0


if __name__ == '__main__':
    sys.exit(main())
