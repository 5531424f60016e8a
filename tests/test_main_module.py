"""
Tests for running solid-salary as ``python -m solid_salary``.

These run a real interpreter so logging is configured the way it is outside
pytest, where the root logger starts without handlers.
"""

import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent

EXPECTED_DEMO_OUTPUT = (
    "Process Salary with Basic Calculation...\n"
    "Processed salary for Hamza: 5000\n"
    "Process Salary with Bonus Calculation...\n"
    "Processed salary for Hamza: 6000\n"
)


def run_module(*args: str) -> subprocess.CompletedProcess:
    """Run the package as a module from the project root."""
    return subprocess.run(
        [sys.executable, "-m", "solid_salary", *args],
        cwd=PROJECT_ROOT,
        capture_output=True,
        text=True,
        check=False,
    )


class TestMainModule:
    """Tests for the ``python -m solid_salary`` entry point."""

    def test_demo_output_and_quiet_stderr(self) -> None:
        """Should print the four demo lines and log nothing by default."""
        result = run_module()

        assert result.returncode == 0
        assert result.stdout == EXPECTED_DEMO_OUTPUT
        assert result.stderr == ""

    def test_verbose_logs_to_stderr_only(self) -> None:
        """Debug records go to stderr; stdout stays exactly the demo lines."""
        result = run_module("-v")

        assert result.returncode == 0
        assert result.stdout == EXPECTED_DEMO_OUTPUT
        assert "DEBUG solid_salary.calculators.basic: basic salary for Hamza: 5000" in result.stderr
        assert "DEBUG solid_salary.calculators.bonus: bonus salary for Hamza: 6000" in result.stderr

    def test_process_command(self) -> None:
        result = run_module("process", "Ada", "4200", "--calculator", "bonus")

        assert result.returncode == 0
        assert result.stdout == "Processed salary for Ada: 5200\n"
        assert result.stderr == ""
