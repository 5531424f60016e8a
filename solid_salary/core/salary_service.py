"""Salary processing service."""

import logging

import click

from solid_salary.calculators.base import SalaryCalculator
from solid_salary.core.employee import Amount, Employee

logger = logging.getLogger(__name__)

# Beyond 2**53 a float no longer represents every integer exactly
EXACT_FLOAT_LIMIT = 2.0**53


def format_amount(amount: Amount) -> str:
    """Render an amount the way it is shown to users.

    Whole numbers drop the fractional part, so ``5000.0`` renders as ``5000``.
    Floats too large to hold every integer digit keep their exponent form.
    """
    if isinstance(amount, float) and amount.is_integer() and abs(amount) < EXACT_FLOAT_LIMIT:
        return str(int(amount))
    return str(amount)


class SalaryService:
    """Computes an employee's salary and reports the result.

    The service depends only on the SalaryCalculator contract. Any calculator
    can be injected without changing this class.
    """

    def __init__(self, salary_calculator: SalaryCalculator):
        """Initialize the service.

        Args:
            salary_calculator: Calculator used for every salary this service processes
        """
        self._salary_calculator = salary_calculator
        logger.debug("salary service using %s", type(salary_calculator).__name__)

    def process_salary(self, employee: Employee) -> None:
        """Calculate the salary and write one result line to stdout.

        Args:
            employee: The employee whose salary is processed
        """
        salary = self._salary_calculator.calculate_salary(employee)
        click.echo(f"Processed salary for {employee.name}: {format_amount(salary)}")
