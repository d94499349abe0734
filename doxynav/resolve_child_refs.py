"""Logic for inlining children that Doxygen stores in separate scripts."""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import replace

from doxynav.nav_entry import NavEntry
from doxynav.navtree_error import NavTreeError

logger = logging.getLogger(__name__)


def resolve_child_refs(
    entries: Sequence[NavEntry],
    trees: Mapping[str, Sequence[NavEntry]],
    origin: str | None = None,
) -> list[NavEntry]:
    """Replace string children references with the referenced trees.

    `origin` is the variable the entries were loaded from, so a script that
    refers back to itself is reported. Every returned entry is a fresh
    object; a tree referenced twice never yields shared nodes.
    """
    return _resolve(entries, trees, (origin,) if origin else ())


def _resolve(
    entries: Sequence[NavEntry],
    trees: Mapping[str, Sequence[NavEntry]],
    stack: tuple[str, ...],
) -> list[NavEntry]:
    out: list[NavEntry] = []
    for e in entries:
        if e.children_ref is not None:
            ref = e.children_ref
            if ref in stack:
                msg = f"Reference cycle: {' -> '.join((*stack, ref))}"
                raise NavTreeError(msg, stack[0])
            target = trees.get(ref)
            if target is None:
                logger.warning(
                    "Unresolved children reference '%s' of '%s'", ref, e.name
                )
                out.append(replace(e))
                continue
            children = tuple(_resolve(target, trees, (*stack, ref)))
            out.append(replace(e, children=children, children_ref=None))
        elif e.children is not None:
            out.append(replace(e, children=tuple(_resolve(e.children, trees, stack))))
        else:
            out.append(replace(e))
    return out
