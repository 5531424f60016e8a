"""CLI entry point for solid-salary."""

import click

from solid_salary import __version__
from solid_salary.calculators.registry import (
    calculator_names,
    create_calculator,
    discover_and_register_calculators,
)
from solid_salary.core.employee import Employee
from solid_salary.core.salary_service import SalaryService
from solid_salary.demo import run_demo
from solid_salary.logging_config import setup_logging

DEFAULT_CALCULATOR = "basic"

# Import all calculator modules so they can be selected by name
discover_and_register_calculators()


@click.group(invoke_without_command=True)
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Log debug output to stderr.")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """solid-salary - SOLID principles on a salary calculation.

    Without a command, runs the salary walkthrough for a sample employee
    using the basic and the bonus calculator.
    """
    setup_logging(verbose)
    if ctx.invoked_subcommand is None:
        run_demo()


@main.command()
@click.argument("name")
@click.argument("basic_salary", type=float)
@click.option(
    "--calculator",
    type=click.Choice(calculator_names()),
    default=DEFAULT_CALCULATOR,
    show_default=True,
    help="Salary calculation to apply.",
)
def process(name: str, basic_salary: float, calculator: str) -> None:
    """Process the salary of a single employee."""
    salary_service = SalaryService(create_calculator(calculator))
    salary_service.process_salary(Employee(name, basic_salary))


@main.command()
def calculators() -> None:
    """List the available salary calculators."""
    for name in calculator_names():
        click.echo(name)


if __name__ == "__main__":
    main()
