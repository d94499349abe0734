"""Main orchestration script for generating Doxygen HTML and checking its navigation."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path


def run_command(cmd_list: Sequence[str | Path], cwd: Path | str | None = None) -> None:
    """Run a command and exit if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        subprocess.run(cmd_list, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def main() -> None:
    """Run the documentation generation and navigation check pipeline."""
    parser = argparse.ArgumentParser(
        description="Generate Doxygen HTML and validate its navigation index."
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Run development checks (linting, tests) before generating documentation",
    )
    parser.add_argument(
        "--skip-doxygen",
        action="store_true",
        help="Validate existing HTML output without running doxygen",
    )
    parser.add_argument(
        "--doxyfile",
        default="Doxyfile",
        help="Doxygen configuration file (default: Doxyfile)",
    )
    parser.add_argument(
        "--html-dir",
        default="doc/html",
        help="Directory doxygen writes HTML to (default: doc/html)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Treat navigation warnings as failures",
    )
    parser.add_argument(
        "--config",
        help="Path to configuration file",
    )
    args = parser.parse_args()

    root_dir = Path(__file__).parent

    if args.dev:
        print("--- Running Development Checks ---")
        run_command([sys.executable, str(root_dir / "dev.py"), "--ci"])
        print(
            "\n✅ Development checks passed. "
            "Proceeding with documentation generation.\n"
        )

    # 1. Generate HTML (and the navigation scripts) with doxygen
    if not args.skip_doxygen:
        print("--- Step 1: Generating Doxygen HTML ---")
        run_command(["doxygen", args.doxyfile])

    # 2. Validate the navigation index scripts
    print("\n--- Step 2: Validating navigation index ---")
    html_dir = Path(args.html_dir)
    report = html_dir / "navtree_report.json"

    cmd: list[str] = [sys.executable, "-m", "doxynav.cli"]
    if args.config:
        cmd.extend(["--config", args.config])
    cmd.extend(["validate", str(html_dir), "--report", str(report)])
    if args.strict:
        cmd.append("--strict")

    run_command(cmd)

    print(f"\nSUCCESS: Navigation index in {html_dir} is valid")


if __name__ == "__main__":
    main()
