"""Data model for a single entry of a Doxygen navigation index."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NavEntry:
    """Represents one (name, href, children) triple of a navigation index."""

    name: str
    href: str | None
    children: tuple[NavEntry, ...] | None = None
    children_ref: str | None = None  # var holding the children, e.g. structfoo__t

    @property
    def is_leaf(self) -> bool:
        """Return True when the entry has neither children nor a reference."""
        return not self.children and self.children_ref is None

    def split_href(self) -> tuple[str, str]:
        """Split the href into its page and anchor parts."""
        if not self.href:
            return "", ""
        page, _, anchor = self.href.partition("#")
        return page, anchor
