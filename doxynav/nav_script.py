"""Data models for parsed navigation index scripts."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from doxynav.nav_entry import NavEntry


@dataclass
class NavScript:
    """Represents the declarations of one Doxygen navigation script."""

    path: Path | None
    trees: dict[str, list[NavEntry]] = field(default_factory=dict)
    constants: dict[str, Any] = field(default_factory=dict)  # non-array vars

    def single_tree(self) -> tuple[str, list[NavEntry]]:
        """Return the only tree of the script, as Doxygen emits for pages."""
        if len(self.trees) != 1:
            names = ", ".join(sorted(self.trees)) or "none"
            msg = f"Expected exactly one navigation tree, found: {names}"
            raise ValueError(msg)
        return next(iter(self.trees.items()))
