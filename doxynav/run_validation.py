"""Orchestration logic for validating navigation scripts and directories."""

import argparse
import logging
from pathlib import Path

from doxynav.compute_config_hash import compute_config_hash
from doxynav.load_config import load_config
from doxynav.load_navtree_dir import NavIndex, load_navtree_dir
from doxynav.load_navtree_script import load_navtree_script
from doxynav.nav_entry import NavEntry
from doxynav.navtree_error import NavTreeError
from doxynav.validate_entries import validate_entries
from doxynav.validation_issue import ERROR, ValidationIssue
from doxynav.validation_report import ValidationReport

logger = logging.getLogger(__name__)


def run_validation(args: argparse.Namespace) -> int:
    """Validate every given script or directory and report the issues."""
    config = load_config(args.config)
    report = ValidationReport(compute_config_hash(config))

    for path in args.paths:
        if not path.exists():
            msg = f"No such file or directory: {path}"
            raise SystemExit(msg)
        trees, failures = _trees_for_path(path, resolve=args.resolve)
        for name, entries in trees.items():
            _record(report, name, entries, validate_entries(entries, config))
        for name, message in failures.items():
            _record(report, name, [], [ValidationIssue("cycle", ERROR, message)])

    if args.report:
        report.generate_report(args.report, config["output"]["json_indent"])
        print(f"Report written to {args.report}")

    total = sum(report.entry_counts.values())
    print(
        f"Checked {total} entries in {len(report.entry_counts)} tree(s): "
        f"{report.error_count} error(s), {report.warning_count} warning(s)"
    )
    if report.error_count or (args.strict and report.warning_count):
        return 1
    return 0


def _record(
    report: ValidationReport,
    name: str,
    entries: list[NavEntry],
    issues: list[ValidationIssue],
) -> None:
    report.add_tree(name, entries, issues)
    for i in issues:
        print(f"{i.severity}: {name}: {i.location}: {i.message} [{i.code}]")


def _trees_for_path(
    path: Path, *, resolve: bool
) -> tuple[dict[str, list[NavEntry]], dict[str, str]]:
    """Collect the trees to validate, and the ones that failed to resolve."""
    if path.is_dir():
        index = load_navtree_dir(path)
        roots = index.roots()
        names = list(roots)
        # Trees only reachable through a reference cycle have no root.
        names += sorted(set(index.trees) - index.reachable_from(roots))
        return _resolve_all(index, names)

    script = load_navtree_script(path)
    if not resolve:
        return dict(script.trees), {}
    index = load_navtree_dir(path.parent)
    index.trees.update(script.trees)
    return _resolve_all(index, list(script.trees))


def _resolve_all(
    index: NavIndex, names: list[str]
) -> tuple[dict[str, list[NavEntry]], dict[str, str]]:
    trees: dict[str, list[NavEntry]] = {}
    failures: dict[str, str] = {}
    for name in names:
        try:
            trees[name] = index.resolved(name)
        except NavTreeError as e:
            logger.warning("Cannot resolve %s: %s", name, e)
            failures[name] = str(e)
    return trees, failures
