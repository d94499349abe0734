"""Conversion between NavEntry trees and plain JSON-friendly data."""

from collections.abc import Sequence
from typing import Any

from doxynav.nav_entry import NavEntry


def entries_to_data(entries: Sequence[NavEntry]) -> list[dict[str, Any]]:
    """Convert entries to a list of dicts suitable for json.dumps."""
    out: list[dict[str, Any]] = []
    for e in entries:
        d: dict[str, Any] = {"name": e.name, "href": e.href}
        if e.children is not None:
            d["children"] = entries_to_data(e.children)
        if e.children_ref is not None:
            d["ref"] = e.children_ref
        out.append(d)
    return out


def entries_from_data(data: Sequence[dict[str, Any]]) -> list[NavEntry]:
    """Rebuild entries from the output of entries_to_data."""
    return [
        NavEntry(
            name=str(d["name"]),
            href=d.get("href"),
            children=(
                tuple(entries_from_data(d["children"]))
                if d.get("children") is not None
                else None
            ),
            children_ref=d.get("ref"),
        )
        for d in data
    ]
