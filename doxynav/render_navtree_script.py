"""Logic for serializing NavEntry trees back into navigation scripts."""

import json
import re
from collections.abc import Sequence

from doxynav.nav_entry import NavEntry

TOP_LEVEL_INDENT = 4
NESTED_INDENT_STEP = 2

# Characters the YAML reader rejects or folds as line breaks inside quoted
# scalars. json.dumps already escapes everything below U+0020.
YAML_UNSAFE_RE = re.compile("[\x7f-\x9f\u2028\u2029\ud800-\udfff\ufffe\uffff]")


def render_navtree_script(var_name: str, entries: Sequence[NavEntry]) -> str:
    """Render entries as a `var NAME = [...];` script in Doxygen's layout."""
    lines = [f"var {var_name} =", "["]
    lines += _render_items(entries, TOP_LEVEL_INDENT)
    lines.append("];")
    return "\n".join(lines) + "\n"


def _render_items(entries: Sequence[NavEntry], indent: int) -> list[str]:
    pad = " " * indent
    out: list[str] = []
    for i, e in enumerate(entries):
        sep = "," if i < len(entries) - 1 else ""
        head = f"{pad}[ {js_literal(e.name)}, {js_literal(e.href)}, "
        if e.children is not None:
            out.append(head + "[")
            out += _render_items(e.children, indent + NESTED_INDENT_STEP)
            out.append(f"{pad}] ]{sep}")
        else:
            out.append(f"{head}{js_literal(e.children_ref)} ]{sep}")
    return out


def js_literal(value: str | None) -> str:
    """Render a string (or None) as a JavaScript literal."""
    if value is None:
        return "null"
    text = json.dumps(value, ensure_ascii=False)
    return YAML_UNSAFE_RE.sub(lambda m: f"\\u{ord(m.group()):04x}", text)
