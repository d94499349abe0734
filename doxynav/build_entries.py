"""Logic for turning decoded navigation literals into NavEntry trees."""

from typing import Any

from doxynav.nav_entry import NavEntry
from doxynav.navtree_error import NavTreeError


def build_entries(raw: Any, where: str = "") -> list[NavEntry]:  # noqa: ANN401
    """Build NavEntry objects from a decoded `[[name, href, children], ...]`."""
    if not isinstance(raw, list):
        msg = f"Expected a list of entries, got {type(raw).__name__}"
        raise NavTreeError(msg, where or None)
    return [_build_entry(item, f"{where}[{i}]") for i, item in enumerate(raw)]


def _build_entry(item: Any, where: str) -> NavEntry:  # noqa: ANN401
    if not isinstance(item, list) or len(item) not in {2, 3}:
        msg = "Expected a [name, href, children] triple"
        raise NavTreeError(msg, where)

    name, href = item[0], item[1]
    third = item[2] if len(item) == 3 else None  # noqa: PLR2004
    if not isinstance(name, str):
        msg = f"Entry name must be a string, got {type(name).__name__}"
        raise NavTreeError(msg, f"{where}[0]")
    if href is not None and not isinstance(href, str):
        msg = f"Entry href must be a string or null, got {type(href).__name__}"
        raise NavTreeError(msg, f"{where}[1]")

    if third is None:
        return NavEntry(name=name, href=href)
    if isinstance(third, str):
        return NavEntry(name=name, href=href, children_ref=third)
    if isinstance(third, list):
        children = tuple(build_entries(third, f"{where}[2]"))
        return NavEntry(name=name, href=href, children=children)

    msg = (
        "Entry children must be a list, a string or null, "
        f"got {type(third).__name__}"
    )
    raise NavTreeError(msg, f"{where}[2]")
