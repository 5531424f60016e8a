"""Bonus salary calculation."""

import logging

from solid_salary.calculators.base import SalaryCalculator
from solid_salary.calculators.registry import register_calculator
from solid_salary.core.employee import Amount, Employee

logger = logging.getLogger(__name__)

BONUS_AMOUNT = 1000


class BonusSalaryCalculator(SalaryCalculator):
    """Pays the basic salary plus a fixed bonus of ``BONUS_AMOUNT``."""

    name = "bonus"

    def calculate_salary(self, employee: Employee) -> Amount:
        salary = employee.basic_salary + BONUS_AMOUNT
        logger.debug("bonus salary for %s: %s", employee.name, salary)
        return salary


register_calculator(BonusSalaryCalculator)
