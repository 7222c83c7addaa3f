"""
FARS Command-Line Interface

Exposes three subcommands:

    fars summarize --years 2013 2014 [...]   Month-by-year accident counts
    fars map --state 1 --year 2013 [...]     State accident map (HTML)
    fars years [...]                         List years with a data file

The package must be installed (``pip install -e .``) for the ``fars`` entry
point to be available.

Package Location: src/fars/cli.py
"""

from __future__ import annotations

import argparse
import os
import sys
import traceback
from pathlib import Path
from typing import List, Optional

# Environment variable consulted when --data-dir is not given.
_DATA_DIR_ENV = "FARS_DATA_DIR"


# ===========================================================================
# Shared helpers
# ===========================================================================

def _resolve_data_dir(arg: Optional[str]) -> Path:
    """Resolve the directory holding the year files.

    Priority: ``--data-dir`` > ``$FARS_DATA_DIR`` > working directory.

    Args:
        arg: Value of ``--data-dir`` (may be ``None``).

    Returns:
        Path to the data directory.

    Raises:
        SystemExit: If the resolved directory does not exist.
    """
    raw = arg or os.environ.get(_DATA_DIR_ENV) or "."
    data_dir = Path(raw).expanduser()
    if not data_dir.is_dir():
        _die(f"Data directory not found: {data_dir}")
    return data_dir


def _die(message: str) -> None:
    """Print an error message and exit with status 1.

    Args:
        message: Human-readable error text.
    """
    print(f"\nError: {message}", file=sys.stderr)
    sys.exit(1)


# ===========================================================================
# Subcommand handlers
# ===========================================================================

def handle_summarize(args: argparse.Namespace) -> None:
    """Summarize accident counts by month for the requested years.

    Writes ``summary_<first>-<last>.csv`` into ``--output-dir`` and, with
    ``--print``, echoes the table to stdout.  Years without a data file are
    skipped with a logged warning.

    Args:
        args: Parsed CLI arguments.
    """
    from fars.analysis.summary import EmptySummaryError
    from fars.reports.generators import ReportGenerator

    data_dir = _resolve_data_dir(args.data_dir)
    gen = ReportGenerator(data_dir=data_dir, output_dir=args.output_dir)

    print(f"\nSummarizing FARS years: {', '.join(args.years)}")
    print(f"    Data: {data_dir}")

    try:
        out_path = gen.write_summary(args.years)
    except EmptySummaryError as exc:
        _die(str(exc))

    if args.print:
        import pandas as pd
        table = pd.read_csv(out_path)
        print()
        print(table.to_string(index=False))

    print(f"\nSummary written to {out_path}")


def handle_map(args: argparse.Namespace) -> None:
    """Render the accident map for one state and year as HTML.

    Args:
        args: Parsed CLI arguments.
    """
    from fars.analysis.states import InvalidStateError
    from fars.data.reader import FarsFileNotFoundError, SchemaError
    from fars.reports.generators import ReportGenerator

    data_dir = _resolve_data_dir(args.data_dir)
    gen = ReportGenerator(data_dir=data_dir, output_dir=args.output_dir)

    print(f"\nMapping state {args.state} for {args.year}")
    print(f"    Data: {data_dir}")

    try:
        out_path = gen.write_state_map(args.state, args.year)
    except (FarsFileNotFoundError, SchemaError, InvalidStateError, ValueError) as exc:
        if args.verbose:
            traceback.print_exc()
        _die(str(exc))

    if out_path is None:
        print("\nNo accidents to plot; nothing written.")
        return

    print(f"\nState map written to {out_path}")


def handle_years(args: argparse.Namespace) -> None:
    """List the years that have a data file.

    Args:
        args: Parsed CLI arguments.
    """
    from fars.data.reader import available_years

    data_dir = _resolve_data_dir(args.data_dir)
    years = available_years(data_dir)
    if not years:
        print(f"No accident_<year>.csv.bz2 files found in {data_dir}")
        return
    for year in years:
        print(year)


# ===========================================================================
# Parser
# ===========================================================================

def _add_common(p: argparse.ArgumentParser, with_output: bool = True) -> None:
    p.add_argument(
        "--data-dir",
        default=None,
        metavar="DIR",
        help=(
            "Directory holding accident_<year>.csv.bz2 files "
            f"(default: ${_DATA_DIR_ENV} or the working directory)."
        ),
    )
    if with_output:
        p.add_argument(
            "--output-dir",
            default="outputs",
            metavar="DIR",
            help="Directory for generated files (default: outputs).",
        )


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Returns:
        Configured ``ArgumentParser``.
    """
    parser = argparse.ArgumentParser(
        prog="fars",
        description="FARS fatal accident summaries and state maps.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO).",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        default=False,
        help="Emit log records as single-line JSON.",
    )
    subs = parser.add_subparsers(dest="command", metavar="COMMAND")
    subs.required = True

    # ------------------------------------------------------------------
    # summarize
    # ------------------------------------------------------------------
    p_sum = subs.add_parser(
        "summarize",
        help="Count accidents per month for one or more years.",
        description=(
            "Build a month-by-year table of fatal accident counts.\n\n"
            "Years without a data file are skipped with a warning; the\n"
            "command fails only if no year can be read."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p_sum.add_argument(
        "--years",
        required=True,
        nargs="+",
        metavar="YYYY",
        help="One or more years, e.g. --years 2013 2014 2015",
    )
    p_sum.add_argument(
        "--print",
        action="store_true",
        default=False,
        help="Also print the summary table to stdout.",
    )
    _add_common(p_sum)
    p_sum.set_defaults(func=handle_summarize)

    # ------------------------------------------------------------------
    # map
    # ------------------------------------------------------------------
    p_map = subs.add_parser(
        "map",
        help="Map accident locations for one state and year.",
        description=(
            "Plot every fatal accident of a state/year on a map of state\n"
            "borders.  Accidents with unknown coordinates are omitted.\n\n"
            "Output file:\n"
            "  <output-dir>/state_<state>_<year>.html"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p_map.add_argument(
        "--state",
        required=True,
        metavar="CODE",
        help="FARS state code, e.g. 1 for Alabama.",
    )
    p_map.add_argument(
        "--year",
        required=True,
        metavar="YYYY",
        help="Year of the data file to load.",
    )
    p_map.add_argument(
        "--verbose",
        action="store_true",
        default=False,
        help="Print the full traceback on failure.",
    )
    _add_common(p_map)
    p_map.set_defaults(func=handle_map)

    # ------------------------------------------------------------------
    # years
    # ------------------------------------------------------------------
    p_years = subs.add_parser(
        "years",
        help="List years that have a data file.",
    )
    _add_common(p_years, with_output=False)
    p_years.set_defaults(func=handle_years)

    return parser


# ===========================================================================
# Entry point
# ===========================================================================

def main(argv: Optional[List[str]] = None) -> None:
    """Parse CLI arguments and dispatch to the appropriate handler.

    This function is registered as the ``fars`` console script entry point
    in ``pyproject.toml``.
    """
    from fars.utils.logging import configure_logging

    parser = _build_parser()
    args   = parser.parse_args(argv)
    configure_logging(args.log_level, json_output=args.log_json)
    args.func(args)


if __name__ == "__main__":
    main()
