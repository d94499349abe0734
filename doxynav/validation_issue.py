"""Data models for structural validation results."""

from dataclasses import dataclass

ERROR = "error"
WARNING = "warning"


@dataclass(frozen=True)
class ValidationIssue:
    """Represents one structural problem found in a navigation tree."""

    code: str  # e.g. empty-name, invalid-href, cycle
    severity: str  # error/warning
    message: str
    path: tuple[str, ...] = ()  # names from the root down to the entry

    @property
    def location(self) -> str:
        """Return a readable location such as `acc_hal_t > power_on`."""
        return " > ".join(self.path) or "<root>"
