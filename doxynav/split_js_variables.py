"""Utility for splitting a navigation script into its variable declarations."""

import re

from doxynav.navtree_error import NavTreeError

VAR_DECL_RE = re.compile(r"^\s*var\s+([A-Za-z_$][\w$]*)\s*=\s*", re.MULTILINE)
# Doxygen prefixes navtreedata.js with a @licstart/@licend block comment.
BLOCK_COMMENT_RE = re.compile(r"^\s*/\*.*?\*/", re.MULTILINE | re.DOTALL)


def split_js_variables(text: str, source: str | None = None) -> dict[str, str]:
    """Map each `var NAME = <literal>;` declaration to its literal text."""
    text = BLOCK_COMMENT_RE.sub("", text)
    matches = list(VAR_DECL_RE.finditer(text))
    if not matches:
        msg = "No 'var NAME = ...' declaration found"
        raise NavTreeError(msg, source)

    literals: dict[str, str] = {}
    for i, m in enumerate(matches):
        end = matches[i + 1].start() if i + 1 < len(matches) else len(text)
        literal = text[m.end() : end].strip().removesuffix(";").rstrip()
        if not literal:
            msg = f"Declaration of '{m.group(1)}' has no value"
            raise NavTreeError(msg, source)
        literals[m.group(1)] = literal
    return literals
