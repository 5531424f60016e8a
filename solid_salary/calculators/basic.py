"""Basic salary calculation."""

import logging

from solid_salary.calculators.base import SalaryCalculator
from solid_salary.calculators.registry import register_calculator
from solid_salary.core.employee import Amount, Employee

logger = logging.getLogger(__name__)


class BasicSalaryCalculator(SalaryCalculator):
    """Pays the basic salary unchanged."""

    name = "basic"

    def calculate_salary(self, employee: Employee) -> Amount:
        salary = employee.basic_salary
        logger.debug("basic salary for %s: %s", employee.name, salary)
        return salary


register_calculator(BasicSalaryCalculator)
