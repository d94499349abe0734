"""Utility for checking navigation hrefs."""

import re

SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*:")
# Relative path, optional fragment; Doxygen anchors are letters, digits, _ and -.
HREF_RE = re.compile(r"^[\w.\-~%/]*(?:#[\w.\-~%:]+)?$")


def is_valid_href(href: str | None) -> bool:
    """Check that href is a relative page path or a fragment reference."""
    if not href or href != href.strip():
        return False
    if SCHEME_RE.match(href) or href.startswith("/"):
        return False
    if not HREF_RE.match(href):
        return False
    page = href.partition("#")[0]
    return ".." not in page.split("/")
