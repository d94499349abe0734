"""Tests for loading directories and resolving children references."""

import logging
from pathlib import Path

import pytest

from doxynav.load_navtree_dir import load_navtree_dir
from doxynav.nav_entry import NavEntry
from doxynav.navtree_error import NavTreeError
from doxynav.resolve_child_refs import resolve_child_refs
from doxynav.validate_entries import validate_entries

DATA_DIR = Path(__file__).parent / "data"

HAL_T = """var structacc__hal__t =
[
    [ "sensor_device", "structacc__hal__t.html#a1", null ],
    [ "properties", "structacc__hal__t.html#a2", null ]
];
"""


@pytest.fixture
def html_dir(tmp_path: Path) -> Path:
    """Create a documentation directory with the sample and one struct page."""
    sample = (DATA_DIR / "acc__definitions_8h.js").read_text(encoding="utf-8")
    (tmp_path / "acc__definitions_8h.js").write_text(sample, encoding="utf-8")
    (tmp_path / "structacc__hal__t.js").write_text(HAL_T, encoding="utf-8")
    (tmp_path / "dynsections.js").write_text("function toggle() {}\n")
    (tmp_path / "custom.js").write_text("console.log('not navigation');\n")
    return tmp_path


def test_load_dir_skips_non_navigation_scripts(html_dir: Path) -> None:
    """Verify that only navigation trees are indexed."""
    index = load_navtree_dir(html_dir)

    assert sorted(index.trees) == ["acc__definitions_8h", "structacc__hal__t"]
    assert index.sources["structacc__hal__t"] == html_dir / "structacc__hal__t.js"
    assert index.roots() == ["acc__definitions_8h"]


def test_load_dir_skips_scripts_that_are_not_utf8(tmp_path: Path) -> None:
    """Verify that a Latin-1 script is skipped instead of aborting the load."""
    (tmp_path / "good.js").write_text(
        'var good =\n[\n    [ "a", "a.html", null ]\n];\n', encoding="utf-8"
    )
    (tmp_path / "latin.js").write_bytes(b"var x = '\xe9';")

    index = load_navtree_dir(tmp_path)

    assert list(index.trees) == ["good"]


def test_resolved_inlines_struct_members(
    html_dir: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Verify that available references are inlined and others kept."""
    index = load_navtree_dir(html_dir)
    with caplog.at_level(logging.WARNING):
        entries = index.resolved("acc__definitions_8h")

    hal = next(e for e in entries if e.name == "acc_hal_t")
    assert hal.children_ref is None
    assert hal.children is not None
    assert [c.name for c in hal.children] == ["sensor_device", "properties"]

    device = entries[0]
    assert device.children_ref == "structacc__hal__sensor__device__t"
    assert "structacc__hal__sensor__device__t" in caplog.text

    codes = {i.code for i in validate_entries(entries)}
    assert codes == {"unresolved-ref"}


def test_resolved_unknown_tree(html_dir: Path) -> None:
    """Verify that asking for an unknown tree fails."""
    with pytest.raises(KeyError):
        load_navtree_dir(html_dir).resolved("nope")


def test_resolve_same_reference_twice_gives_fresh_nodes() -> None:
    """Verify that two references to one tree never share nodes."""
    trees = {"members": [NavEntry("m", "m.html")]}
    entries = [
        NavEntry("a", "a.html", children_ref="members"),
        NavEntry("b", "b.html", children_ref="members"),
    ]
    resolved = resolve_child_refs(entries, trees)

    assert resolved[0].children == resolved[1].children
    assert resolved[0].children[0] is not resolved[1].children[0]
    assert [i.code for i in validate_entries(resolved)] == ["duplicate-href"]


def test_resolve_reference_cycle() -> None:
    """Verify that scripts referring to each other are rejected."""
    trees = {
        "a": [NavEntry("to_b", "b.html", children_ref="b")],
        "b": [NavEntry("to_a", "a.html", children_ref="a")],
    }
    with pytest.raises(NavTreeError, match="a -> b -> a"):
        resolve_child_refs(trees["a"], trees, "a")


def test_reachable_from(tmp_path: Path) -> None:
    """Verify that trees in a reference cycle are not reachable from roots."""
    (tmp_path / "root.js").write_text('var root =\n[\n    [ "x", "x.html", null ]\n];')
    (tmp_path / "a.js").write_text('var a =\n[\n    [ "b", "b.html", "b" ]\n];\n')
    (tmp_path / "b.js").write_text('var b =\n[\n    [ "a", "a.html", "a" ]\n];\n')
    index = load_navtree_dir(tmp_path)

    assert index.roots() == ["root"]
    assert index.reachable_from(index.roots()) == {"root"}
    assert index.reachable_from(["a"]) == {"a", "b"}
