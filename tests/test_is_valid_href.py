"""Tests for href checks."""

import pytest

from doxynav.is_valid_href import is_valid_href


@pytest.mark.parametrize(
    "href",
    [
        "structacc__hal__t.html",
        "acc__definitions_8h.html#a0f96e77a8001c9bf8147b96a4dcfdada",
        "#details",
        "group__hal.html",
        "sub/dir/page.html#a-b_c",
    ],
)
def test_valid_hrefs(href: str) -> None:
    """Verify that relative pages and fragments are accepted."""
    assert is_valid_href(href)


@pytest.mark.parametrize(
    "href",
    [
        None,
        "",
        "#",
        " page.html",
        "page name.html",
        "https://example.com/page.html",
        "javascript:alert(1)",
        "/abs/page.html",
        "../outside.html",
        "a/../../b.html",
        "page.html#a#b",
        'page".html',
    ],
)
def test_invalid_hrefs(href: str | None) -> None:
    """Verify that absolute, external and malformed hrefs are rejected."""
    assert not is_valid_href(href)
