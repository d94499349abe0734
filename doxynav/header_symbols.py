"""Scanner for the symbols a C header declares.

This is a pattern scanner for plain declaration headers, the kind Doxygen
navigation indexes are generated from. It recognizes:

- ``typedef`` aliases, including function pointer typedefs,
- ``typedef struct/enum/union { ... } name;`` definitions,
- tagged ``struct``/``enum``/``union`` definitions,
- enumerators of every enum body.

Nested bodies (a struct declared inside a struct) and macros are not
expanded.
"""

import re
from dataclasses import dataclass
from pathlib import Path

BLOCK_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
LINE_COMMENT_RE = re.compile(r"//[^\n]*")
PREPROCESSOR_RE = re.compile(r"^[ \t]*#(?:[^\n]*\\\n)*[^\n]*", re.MULTILINE)

FUNC_PTR_TYPEDEF_RE = re.compile(
    r"\btypedef\s+[^;{}]*?\(\s*\*\s*(\w+)\s*\)\s*\([^;]*?\)\s*;"
)
BODY_TYPEDEF_RE = re.compile(
    r"\btypedef\s+(struct|enum|union)\s*\w*\s*\{[^{}]*\}\s*(\w+)\s*;"
)
ALIAS_TYPEDEF_RE = re.compile(r"\btypedef\s+[^;{}()]*?\b(\w+)\s*(?:\[[^\]]*\])?\s*;")
TAG_RE = re.compile(r"\b(struct|enum|union)\s+(\w+)\s*\{")
ENUM_BODY_RE = re.compile(r"\benum\b\s*\w*\s*\{([^{}]*)\}")
ENUMERATOR_RE = re.compile(r"^\s*([A-Za-z_]\w*)")


@dataclass(frozen=True)
class DeclaredSymbol:
    """Represents a symbol declared by a header."""

    name: str
    kind: str  # typedef/struct/enum/union/enumerator
    line: int


def _blank_out(m: re.Match[str]) -> str:
    # Keep newlines so line numbers stay correct.
    return "\n" * m.group(0).count("\n")


def _line_of(text: str, pos: int) -> int:
    return text.count("\n", 0, pos) + 1


def scan_header_symbols(text: str) -> list[DeclaredSymbol]:
    """Return the symbols declared in header text, in source order."""
    text = BLOCK_COMMENT_RE.sub(_blank_out, text)
    text = LINE_COMMENT_RE.sub("", text)
    text = PREPROCESSOR_RE.sub(_blank_out, text)

    found: dict[tuple[str, str], tuple[int, DeclaredSymbol]] = {}

    def add(name: str, kind: str, pos: int) -> None:
        sym = DeclaredSymbol(name, kind, _line_of(text, pos))
        found.setdefault((name, kind), (pos, sym))

    for m in FUNC_PTR_TYPEDEF_RE.finditer(text):
        add(m.group(1), "typedef", m.start(1))
    for m in BODY_TYPEDEF_RE.finditer(text):
        add(m.group(2), m.group(1), m.start(2))
    for m in ALIAS_TYPEDEF_RE.finditer(text):
        add(m.group(1), "typedef", m.start(1))
    for m in TAG_RE.finditer(text):
        add(m.group(2), m.group(1), m.start(2))
    for m in ENUM_BODY_RE.finditer(text):
        offset = m.start(1)
        for part in m.group(1).split(","):
            em = ENUMERATOR_RE.match(part)
            if em:
                add(em.group(1), "enumerator", offset + em.start(1))
            offset += len(part) + 1

    return [sym for _, sym in sorted(found.values(), key=lambda p: p[0])]


def load_header_symbols(path: Path) -> list[DeclaredSymbol]:
    """Scan a header file from disk."""
    return scan_header_symbols(path.read_text(encoding="utf-8", errors="replace"))
