"""Logic for comparing documented symbols with declared ones."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from doxynav.header_symbols import DeclaredSymbol
from doxynav.iter_entries import iter_entries
from doxynav.nav_entry import NavEntry


@dataclass
class SymbolCoverage:
    """Represents how much of a header the navigation index documents."""

    documented: list[str] = field(default_factory=list)
    undocumented: list[DeclaredSymbol] = field(default_factory=list)
    unknown: list[str] = field(default_factory=list)  # indexed, not declared

    @property
    def ratio(self) -> float:
        """Share of declared symbols that appear in the index."""
        total = len(self.documented) + len(self.undocumented)
        return len(self.documented) / total if total else 1.0


def compare_symbols(
    entries: Sequence[NavEntry],
    declared: Sequence[DeclaredSymbol],
    ignore: Iterable[str] = (),
    kinds: Iterable[str] | None = None,
    listed: Sequence[NavEntry] | None = None,
) -> SymbolCoverage:
    """Match index entry names against the symbols a header declares.

    Every name in `entries` can document a symbol, but only names in
    `listed` (the tree before references were inlined, defaulting to
    `entries`) are reported as unknown. Struct members pulled in from
    other pages are not declarations of the header.
    """
    ignored = set(ignore)
    wanted = set(kinds) if kinds is not None else None
    indexed = {step.entry.name for step in iter_entries(entries)}

    coverage = SymbolCoverage()
    declared_names: set[str] = set()
    for sym in declared:
        if sym.name in ignored or (wanted is not None and sym.kind not in wanted):
            continue
        if sym.name in declared_names:
            continue
        declared_names.add(sym.name)
        if sym.name in indexed:
            coverage.documented.append(sym.name)
        else:
            coverage.undocumented.append(sym)

    all_declared = {sym.name for sym in declared}
    listed_names = (
        indexed
        if listed is None
        else {step.entry.name for step in iter_entries(listed)}
    )
    coverage.unknown = sorted(listed_names - all_declared - ignored)
    return coverage
