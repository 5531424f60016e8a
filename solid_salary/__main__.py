"""Allow running the demo with ``python -m solid_salary``."""

from solid_salary.cli import main

main()
