"""Command line entry point for the design token propagation analyzer."""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from token_propagation.errors import ConfigError
from token_propagation.run_analysis import run_propagation


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    ap = argparse.ArgumentParser(
        description="Measure how far design tokens have propagated into CSS.",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML configuration file",
    )
    ap.add_argument(
        "--repo-path",
        type=Path,
        help="Repository root to scan (overrides the config file)",
    )
    ap.add_argument(
        "--output",
        type=Path,
        default=Path("propagation_report.json"),
        help="Where to write the JSON report (default: propagation_report.json)",
    )
    ap.add_argument(
        "--unresolved-output",
        type=Path,
        help="Also write the unresolved-variable report to this JSON file",
    )
    ap.add_argument(
        "--include-declarations",
        action="store_true",
        help="Include per-declaration traces and bindings in the report",
    )
    ap.add_argument(
        "--jobs",
        type=int,
        default=1,
        help="Number of files to analyze concurrently (default: 1)",
    )
    ap.add_argument(
        "--dry-run",
        action="store_true",
        help="Analyze and print the summary without writing files",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug diagnostics",
    )
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    """Run the analyzer from the command line."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return run_propagation(args)
    except ConfigError as e:
        msg = f"Configuration error: {e}"
        raise SystemExit(msg) from e


if __name__ == "__main__":
    raise SystemExit(main())
