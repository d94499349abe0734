"""Utilities for walking NavEntry trees."""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from doxynav.nav_entry import NavEntry


@dataclass(frozen=True)
class WalkStep:
    """One visited entry together with its position in the tree."""

    depth: int
    path: tuple[str, ...]  # names of the ancestors, root first
    entry: NavEntry


def iter_entries(entries: Sequence[NavEntry]) -> Iterator[WalkStep]:
    """Walk entries depth-first in document order.

    An entry that is already one of its own ancestors is yielded but not
    descended into, so malformed cyclic input cannot loop forever.
    """
    yield from _walk(entries, 0, (), set())


def _walk(
    entries: Sequence[NavEntry],
    depth: int,
    path: tuple[str, ...],
    ancestors: set[int],
) -> Iterator[WalkStep]:
    for e in entries:
        yield WalkStep(depth=depth, path=path, entry=e)
        if e.children and id(e) not in ancestors:
            ancestors.add(id(e))
            yield from _walk(e.children, depth + 1, (*path, e.name), ancestors)
            ancestors.discard(id(e))


def count_entries(entries: Sequence[NavEntry]) -> int:
    """Count all entries of the tree."""
    return sum(1 for _ in iter_entries(entries))


def find_entries(entries: Sequence[NavEntry], name: str) -> list[WalkStep]:
    """Return every entry whose name matches exactly."""
    return [step for step in iter_entries(entries) if step.entry.name == name]
