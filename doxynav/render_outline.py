"""Logic for rendering navigation trees and coverage as Markdown."""

from collections.abc import Sequence

from doxynav.compare_symbols import SymbolCoverage
from doxynav.iter_entries import iter_entries
from doxynav.nav_entry import NavEntry


def md_table(headers: list[str], rows: list[list[str]]) -> str:
    """Generate a Markdown table, escaping pipes in cells."""
    if not rows:
        return ""
    out = [
        "| " + " | ".join(headers) + " |",
        "| " + " | ".join(["---"] * len(headers)) + " |",
    ]
    out.extend("| " + " | ".join(c.replace("|", "\\|") for c in r) + " |" for r in rows)
    return "\n".join(out)


def render_outline(title: str, entries: Sequence[NavEntry], base_url: str = "") -> str:
    """Render a navigation tree as a nested Markdown list."""
    parts: list[str] = [f"# {title}", ""]
    for step in iter_entries(entries):
        e = step.entry
        pad = "  " * step.depth
        label = f"`{e.name}`" if e.name else "*(unnamed)*"
        line = f"{pad}- [{label}]({base_url}{e.href})" if e.href else f"{pad}- {label}"
        if e.children_ref is not None:
            line += f" (children in `{e.children_ref}`)"
        parts.append(line)
    return "\n".join(parts).rstrip() + "\n"


def render_coverage_table(header_name: str, coverage: SymbolCoverage) -> str:
    """Render symbol coverage as a Markdown summary with a table of gaps."""
    parts: list[str] = [
        f"# Coverage of {header_name}",
        "",
        f"- Documented: {len(coverage.documented)}",
        f"- Undocumented: {len(coverage.undocumented)}",
        f"- Ratio: {coverage.ratio:.0%}",
        "",
    ]
    rows = [[f"`{s.name}`", s.kind, str(s.line)] for s in coverage.undocumented]
    if rows:
        table = md_table(["Symbol", "Kind", "Line"], rows)
        parts += ["## Undocumented symbols", "", table, ""]
    if coverage.unknown:
        parts += ["## Index entries without a declaration", ""]
        parts += [f"- `{name}`" for name in coverage.unknown]
        parts.append("")
    return "\n".join(parts).rstrip() + "\n"
