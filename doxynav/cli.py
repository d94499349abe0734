"""Command line interface for inspecting Doxygen navigation index scripts.

Subcommands:

- ``validate``: check names, hrefs and tree shape of scripts or whole
  HTML directories, optionally writing a JSON report.
- ``dump``: print a tree as a navigation script, JSON or a Markdown outline.
- ``coverage``: compare a tree against the header it documents.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from doxynav.compare_symbols import compare_symbols
from doxynav.entries_to_data import entries_to_data
from doxynav.header_symbols import load_header_symbols
from doxynav.load_config import load_config
from doxynav.load_navtree_dir import load_navtree_dir
from doxynav.load_navtree_script import load_navtree_script
from doxynav.nav_entry import NavEntry
from doxynav.navtree_error import NavTreeError
from doxynav.render_navtree_script import render_navtree_script
from doxynav.render_outline import render_coverage_table, render_outline
from doxynav.run_validation import run_validation


def select_tree(
    path: Path, var_name: str | None, *, resolve: bool
) -> tuple[str, list[NavEntry]]:
    """Load one tree from a script, inlining referenced children on request."""
    if not path.is_file():
        msg = f"No such file: {path}"
        raise SystemExit(msg)
    script = load_navtree_script(path)
    if var_name is None:
        try:
            var_name, entries = script.single_tree()
        except ValueError as e:
            msg = f"{path}: {e}; pick one with --var"
            raise SystemExit(msg) from e
    elif var_name in script.trees:
        entries = script.trees[var_name]
    else:
        msg = f"{path}: no navigation tree named '{var_name}'"
        raise SystemExit(msg)

    if resolve:
        entries = resolve_tree(path, var_name, entries)
    return var_name, entries


def resolve_tree(path: Path, var_name: str, entries: list[NavEntry]) -> list[NavEntry]:
    """Inline children referenced by a tree from the scripts beside it."""
    index = load_navtree_dir(path.parent)
    index.trees[var_name] = entries
    return index.resolved(var_name)


def run_dump(args: argparse.Namespace) -> int:
    """Print a tree in the requested format."""
    config = load_config(args.config)
    var_name, entries = select_tree(args.script, args.var, resolve=args.resolve)

    if args.format == "json":
        out = json.dumps(
            entries_to_data(entries),
            indent=config["output"]["json_indent"],
            ensure_ascii=False,
        )
        out += "\n"
    elif args.format == "markdown":
        out = render_outline(var_name, entries, config["output"]["base_url"])
    else:
        out = render_navtree_script(var_name, entries)

    if args.output:
        args.output.write_text(out, encoding="utf-8")
        print(f"Wrote {args.format} dump of '{var_name}' to {args.output}")
    else:
        sys.stdout.write(out)
    return 0


def run_coverage(args: argparse.Namespace) -> int:
    """Compare a tree with the symbols its header declares."""
    config = load_config(args.config)
    var_name, listed = select_tree(args.script, args.var, resolve=False)
    entries = resolve_tree(args.script, var_name, listed) if args.resolve else listed
    declared = load_header_symbols(args.header)
    coverage = compare_symbols(
        entries,
        declared,
        ignore=config["ignore_symbols"],
        kinds=config["coverage"]["kinds"],
        listed=listed,
    )
    sys.stdout.write(render_coverage_table(args.header.name, coverage))

    fail_under = float(config["coverage"]["fail_under"])
    if coverage.ratio < fail_under:
        print(f"Coverage {coverage.ratio:.0%} is below {fail_under:.0%}")
        return 1
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    ap = argparse.ArgumentParser(
        prog="doxynav",
        description="Inspect and validate Doxygen navigation index scripts.",
    )
    ap.add_argument("--config", help="Path to configuration file")
    ap.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    sub = ap.add_subparsers(dest="command", required=True)

    validate = sub.add_parser("validate", help="Check navigation tree structure")
    validate.add_argument(
        "paths",
        nargs="+",
        type=Path,
        help="Navigation *.js scripts or Doxygen HTML directories",
    )
    validate.add_argument("--report", help="Write a JSON report to this file")
    validate.add_argument(
        "--resolve",
        action="store_true",
        help="Inline children from sibling scripts before checking a single file",
    )
    validate.add_argument(
        "--strict", action="store_true", help="Treat warnings as failures"
    )
    validate.set_defaults(func=run_validation)

    dump = sub.add_parser("dump", help="Print a navigation tree")
    dump.add_argument("script", type=Path, help="Navigation *.js script")
    dump.add_argument("--var", help="Tree variable to print (default: the only one)")
    dump.add_argument(
        "--format", choices=["js", "json", "markdown"], default="json"
    )
    dump.add_argument(
        "--resolve", action="store_true", help="Inline children from sibling scripts"
    )
    dump.add_argument("-o", "--output", type=Path, help="Write to file, not stdout")
    dump.set_defaults(func=run_dump)

    coverage = sub.add_parser("coverage", help="Compare a tree with its C header")
    coverage.add_argument("script", type=Path, help="Navigation *.js script")
    coverage.add_argument("header", type=Path, help="Header the script documents")
    coverage.add_argument("--var", help="Tree variable to compare")
    coverage.add_argument(
        "--resolve", action="store_true", help="Inline children from sibling scripts"
    )
    coverage.set_defaults(func=run_coverage)
    return ap


def main(argv: list[str] | None = None) -> int:
    """Run the command line interface."""
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )
    try:
        return args.func(args)
    except NavTreeError as e:
        raise SystemExit(str(e)) from e


if __name__ == "__main__":
    raise SystemExit(main())
