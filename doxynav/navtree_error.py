"""Error raised for malformed navigation index scripts."""


class NavTreeError(ValueError):
    """Raised when a navigation index script cannot be parsed or resolved."""

    def __init__(self, message: str, source: str | None = None) -> None:
        """Initialize the error with a message and the offending source."""
        self.source = source
        super().__init__(f"{source}: {message}" if source else message)
