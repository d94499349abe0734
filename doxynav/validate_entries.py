"""Structural validation of navigation index trees."""

from collections.abc import Sequence
from typing import Any

from doxynav.is_valid_href import is_valid_href
from doxynav.load_config import DEFAULT_CONFIG
from doxynav.nav_entry import NavEntry
from doxynav.validation_issue import ERROR, WARNING, ValidationIssue


class _Validator:
    """Walks a tree once, collecting issues for every entry."""

    def __init__(self, options: dict[str, Any]) -> None:
        self.allow_missing_href = bool(options.get("allow_missing_href", False))
        self.warn_duplicate_href = bool(options.get("warn_duplicate_href", True))
        self.max_depth = int(options.get("max_depth", 0))
        self.issues: list[ValidationIssue] = []
        self.seen: set[int] = set()
        self.href_owner: dict[str, tuple[str, ...]] = {}

    def visit(
        self,
        entries: Sequence[NavEntry],
        parents: tuple[str, ...],
        ancestors: list[int],
    ) -> None:
        for e in entries:
            path = (*parents, e.name)
            if id(e) in ancestors:
                self._add("cycle", ERROR, f"'{e.name}' contains itself", path)
                continue
            if id(e) in self.seen:
                msg = f"'{e.name}' is reachable more than once"
                self._add("shared-node", ERROR, msg, path)
                continue
            self.seen.add(id(e))
            self._check_entry(e, path)
            if e.children:
                ancestors.append(id(e))
                self.visit(e.children, path, ancestors)
                ancestors.pop()

    def _check_entry(self, e: NavEntry, path: tuple[str, ...]) -> None:
        if not e.name.strip():
            self._add("empty-name", ERROR, "Entry name is empty", path)

        if e.href is None:
            if not self.allow_missing_href:
                self._add("missing-href", ERROR, "Entry has no href", path)
        elif not is_valid_href(e.href):
            msg = f"'{e.href}' is not a relative page or fragment reference"
            self._add("invalid-href", ERROR, msg, path)
        elif self.warn_duplicate_href:
            owner = self.href_owner.setdefault(e.href, path)
            if owner != path:
                msg = f"'{e.href}' is also used by {' > '.join(owner)}"
                self._add("duplicate-href", WARNING, msg, path)

        if e.children_ref is not None:
            msg = f"Children reference '{e.children_ref}' was not resolved"
            self._add("unresolved-ref", WARNING, msg, path)

        if self.max_depth and len(path) > self.max_depth:
            msg = f"Nesting depth {len(path)} exceeds {self.max_depth}"
            self._add("too-deep", WARNING, msg, path)

    def _add(self, code: str, severity: str, message: str, path: tuple) -> None:
        self.issues.append(ValidationIssue(code, severity, message, path))


def validate_entries(
    entries: Sequence[NavEntry],
    config: dict[str, Any] | None = None,
) -> list[ValidationIssue]:
    """Check names, hrefs and tree shape of a navigation index.

    Returns the issues in document order; an empty list means the tree has
    non-empty names, relative hrefs, and every node reachable exactly once.
    """
    options = (config or DEFAULT_CONFIG).get("validation", {})
    validator = _Validator(options)
    validator.visit(entries, (), [])
    return validator.issues


def has_errors(issues: Sequence[ValidationIssue]) -> bool:
    """Check whether any issue is an error."""
    return any(i.severity == ERROR for i in issues)
