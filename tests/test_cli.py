"""Tests for the command line interface."""

import json
import shutil
from pathlib import Path

import pytest

from doxynav.cli import main

DATA_DIR = Path(__file__).parent / "data"
SAMPLE = DATA_DIR / "acc__definitions_8h.js"
HEADER = DATA_DIR / "acc_definitions.h"


def test_validate_sample(capsys: pytest.CaptureFixture[str], tmp_path: Path) -> None:
    """Verify that the sample passes, and fails only under --strict."""
    report = tmp_path / "report.json"
    assert main(["validate", str(SAMPLE), "--report", str(report)]) == 0

    out = capsys.readouterr().out
    assert "Checked 16 entries in 1 tree(s): 0 error(s), 4 warning(s)" in out
    assert "warning: acc__definitions_8h: acc_hal_t:" in out
    assert json.loads(report.read_text(encoding="utf-8"))["meta"]["total_entries"] == 16

    assert main(["validate", str(SAMPLE), "--strict"]) == 1


def test_validate_directory_with_errors(
    capsys: pytest.CaptureFixture[str], tmp_path: Path
) -> None:
    """Verify directory mode and the exit code on errors."""
    shutil.copy(SAMPLE, tmp_path)
    (tmp_path / "structacc__hal__t.js").write_text(
        'var structacc__hal__t =\n[\n    [ "", "structacc__hal__t.html#a1", null ]\n];',
        encoding="utf-8",
    )

    assert main(["validate", str(tmp_path)]) == 1
    out = capsys.readouterr().out
    assert "error: acc__definitions_8h: acc_hal_t > : Entry name is empty" in out


def test_validate_missing_path(tmp_path: Path) -> None:
    """Verify that a missing input stops with a message."""
    with pytest.raises(SystemExit, match="No such file or directory"):
        main(["validate", str(tmp_path / "absent.js")])


def test_validate_malformed_script(tmp_path: Path) -> None:
    """Verify that parse errors become a clean exit."""
    bad = tmp_path / "bad.js"
    bad.write_text("var x = [ [ 1, 2, 3 ] ];", encoding="utf-8")
    with pytest.raises(SystemExit, match=r"x\[0\]\[0\]"):
        main(["validate", str(bad)])


def test_dump_formats(capsys: pytest.CaptureFixture[str], tmp_path: Path) -> None:
    """Verify the js, json and markdown dumps."""
    assert main(["dump", str(SAMPLE), "--format", "js"]) == 0
    assert capsys.readouterr().out == SAMPLE.read_text(encoding="utf-8").rstrip() + "\n"

    assert main(["dump", str(SAMPLE)]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data[12]["name"] == "acc_hal_register_isr_status_t"

    out_file = tmp_path / "outline.md"
    assert main(["dump", str(SAMPLE), "--format", "markdown", "-o", str(out_file)]) == 0
    md = out_file.read_text(encoding="utf-8")
    assert md.startswith("# acc__definitions_8h\n")
    assert "  - [`ACC_HAL_REGISTER_ISR_STATUS_OK`]" in md


def test_dump_unknown_var() -> None:
    """Verify that selecting a missing tree fails."""
    with pytest.raises(SystemExit, match="no navigation tree named 'nope'"):
        main(["dump", str(SAMPLE), "--var", "nope"])


def test_coverage(capsys: pytest.CaptureFixture[str], tmp_path: Path) -> None:
    """Verify the coverage table and the fail_under threshold."""
    assert main(["coverage", str(SAMPLE), str(HEADER)]) == 0
    assert "- Ratio: 100%" in capsys.readouterr().out

    partial = tmp_path / "partial.js"
    partial.write_text(
        'var partial =\n[\n    [ "acc_hal_t", "structacc__hal__t.html", null ]\n];\n',
        encoding="utf-8",
    )
    config = tmp_path / "doxynav.yml"
    config.write_text("coverage:\n  fail_under: 0.5\n", encoding="utf-8")

    assert main(["--config", str(config), "coverage", str(partial), str(HEADER)]) == 1
    out = capsys.readouterr().out
    assert "| `acc_sensor_id_t` | typedef | 16 |" in out
    assert "is below 50%" in out


def test_coverage_resolve_ignores_inlined_members(
    capsys: pytest.CaptureFixture[str], tmp_path: Path
) -> None:
    """Verify that struct members from sibling scripts are not reported."""
    shutil.copy(SAMPLE, tmp_path / SAMPLE.name)
    (tmp_path / "structacc__hal__t.js").write_text(
        "var structacc__hal__t =\n[\n"
        '    [ "power_on", "structacc__hal__t.html#a1", null ]\n];\n',
        encoding="utf-8",
    )

    script = tmp_path / SAMPLE.name
    assert main(["coverage", str(script), str(HEADER), "--resolve"]) == 0
    out = capsys.readouterr().out
    assert "power_on" not in out
    assert "- Ratio: 100%" in out
