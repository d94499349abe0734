"""Logic for loading every navigation script of a Doxygen HTML directory."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from doxynav.load_navtree_script import load_navtree_script
from doxynav.nav_entry import NavEntry
from doxynav.navtree_error import NavTreeError
from doxynav.resolve_child_refs import resolve_child_refs

logger = logging.getLogger(__name__)

# Scripts Doxygen copies next to the pages; none of them hold navigation data.
DEFAULT_EXCLUDE = (
    "jquery.js",
    "dynsections.js",
    "menu.js",
    "menudata.js",
    "navtree.js",
    "resize.js",
    "search.js",
    "searchdata.js",
    "cookie.js",
    "clipboard.js",
)


@dataclass
class NavIndex:
    """All navigation trees of a documentation directory, keyed by variable."""

    trees: dict[str, list[NavEntry]] = field(default_factory=dict)
    sources: dict[str, Path] = field(default_factory=dict)

    def resolved(self, var_name: str) -> list[NavEntry]:
        """Return the tree with every children reference inlined."""
        if var_name not in self.trees:
            msg = f"Unknown navigation tree '{var_name}'"
            raise KeyError(msg)
        return resolve_child_refs(self.trees[var_name], self.trees, var_name)

    def roots(self) -> list[str]:
        """Return trees that no other tree refers to, e.g. NAVTREE."""
        referenced = {
            e.children_ref
            for entries in self.trees.values()
            for e in _flatten(entries)
            if e.children_ref
        }
        return sorted(name for name in self.trees if name not in referenced)

    def reachable_from(self, names: Iterable[str]) -> set[str]:
        """Return the trees reachable from `names` through children references."""
        reached: set[str] = set()
        pending = [n for n in names if n in self.trees]
        while pending:
            name = pending.pop()
            if name in reached:
                continue
            reached.add(name)
            pending.extend(
                e.children_ref
                for e in _flatten(self.trees[name])
                if e.children_ref in self.trees
            )
        return reached


def _flatten(entries: Iterable[NavEntry]) -> Iterable[NavEntry]:
    for e in entries:
        yield e
        if e.children:
            yield from _flatten(e.children)


def load_navtree_dir(
    html_dir: Path,
    exclude: Iterable[str] = DEFAULT_EXCLUDE,
) -> NavIndex:
    """Load the navigation trees of all scripts found in a directory."""
    skip = set(exclude)
    index = NavIndex()
    for path in sorted(html_dir.glob("*.js")):
        if path.name in skip:
            continue
        try:
            script = load_navtree_script(path)
        except NavTreeError as e:
            logger.debug("Skipping %s: %s", path.name, e)
            continue
        for var_name, entries in script.trees.items():
            if var_name in index.trees:
                logger.warning(
                    "Tree '%s' in %s already defined in %s; keeping the first",
                    var_name,
                    path.name,
                    index.sources[var_name].name,
                )
                continue
            index.trees[var_name] = entries
            index.sources[var_name] = path

    logger.info("Loaded %d navigation tree(s) from %s", len(index.trees), html_dir)
    return index
