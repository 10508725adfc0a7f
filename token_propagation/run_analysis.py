"""Orchestration of a propagation analysis over many stylesheets."""

import argparse
import logging
import os
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from token_propagation.compute_config_hash import compute_config_hash
from token_propagation.compute_percentage import NOT_APPLICABLE
from token_propagation.errors import FileAnalysisError
from token_propagation.file_result import FileResult
from token_propagation.find_css_files import find_css_files
from token_propagation.load_config import load_config
from token_propagation.path_utils import relative_to_repo
from token_propagation.propagation_analyzer import PropagationAnalyzer
from token_propagation.propagation_config import PropagationConfig
from token_propagation.propagation_report import PropagationReport
from token_propagation.unresolved_var_tracker import UnresolvedVarTracker

logger = logging.getLogger(__name__)


def analyze_files(
    paths: Sequence[str], analyzer: PropagationAnalyzer, jobs: int = 1
) -> list[FileResult]:
    """Analyze every path, keeping input order.

    A file that fails is returned with ``error`` set so it drops out of the
    averages without stopping the run.
    """
    if jobs > 1:
        with ThreadPoolExecutor(max_workers=jobs) as pool:
            return list(pool.map(lambda p: _analyze_one(p, analyzer), paths))
    return [_analyze_one(p, analyzer) for p in paths]


def _analyze_one(path: str, analyzer: PropagationAnalyzer) -> FileResult:
    try:
        return analyzer.analyze_file(path)
    except FileAnalysisError as e:
        logger.error("%s", e)
        absolute_path = os.path.abspath(path)
        return FileResult(
            path=relative_to_repo(absolute_path, analyzer.config.repo_path),
            absolute_path=absolute_path,
            error=e.reason,
        )


def run_propagation(args: argparse.Namespace) -> int:
    """Execute the full analysis pipeline described by CLI arguments."""
    raw_config = load_config(args.config)
    if args.repo_path:
        raw_config["repo_path"] = str(args.repo_path)
    config = PropagationConfig.from_dict(raw_config)

    css_files = find_css_files(
        config.repo_path, config.include_patterns, config.ignore_patterns
    )
    if not css_files:
        msg = f"No CSS files found under: {config.repo_path}"
        raise SystemExit(msg)

    tracker = UnresolvedVarTracker(config.design_token_keys, config.repo_path)
    analyzer = PropagationAnalyzer(config, tracker=tracker)
    # Names loaded from design_token_keys_file are part of the hash.
    config_hash = compute_config_hash(
        {**raw_config, "design_token_keys": list(config.design_token_keys)}
    )
    report = PropagationReport(config_hash, tracker)

    print(f"Analyzing {len(css_files)} stylesheets under: {config.repo_path}")
    for result in analyze_files(css_files, analyzer, jobs=args.jobs):
        report.add_result(result)

    summary = report.build()
    print(
        "Total average propagation: "
        f"{_format_percentage(summary['total_average_propagation'])}"
    )
    if summary["meta"]["failed_files"]:
        print(f"Failed to analyze {summary['meta']['failed_files']} file(s)")

    if args.dry_run:
        return 0

    report.write(str(args.output), include_declarations=args.include_declarations)
    print(f"Report written to: {args.output}")
    if args.unresolved_output:
        report.write_unresolved(str(args.unresolved_output))
        print(f"Unresolved variables written to: {args.unresolved_output}")
    return 0


def _format_percentage(value: float) -> str:
    if value == NOT_APPLICABLE:
        return "n/a"
    return f"{value:.2f}%"
