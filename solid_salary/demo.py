"""The fixed salary processing walkthrough run by ``solid-salary``."""

import click

from solid_salary.calculators.base import SalaryCalculator
from solid_salary.calculators.basic import BasicSalaryCalculator
from solid_salary.calculators.bonus import BonusSalaryCalculator
from solid_salary.core.employee import Employee
from solid_salary.core.salary_service import SalaryService

DEMO_EMPLOYEE_NAME = "Hamza"
DEMO_BASIC_SALARY = 5000


def run_demo() -> None:
    """Process one employee's salary with the basic and then the bonus calculator."""
    employee = Employee(DEMO_EMPLOYEE_NAME, DEMO_BASIC_SALARY)

    basic_salary_calculator: SalaryCalculator = BasicSalaryCalculator()
    bonus_salary_calculator: SalaryCalculator = BonusSalaryCalculator()

    salary_service_basic = SalaryService(basic_salary_calculator)
    salary_service_bonus = SalaryService(bonus_salary_calculator)

    click.echo("Process Salary with Basic Calculation...")
    salary_service_basic.process_salary(employee)

    click.echo("Process Salary with Bonus Calculation...")
    salary_service_bonus.process_salary(employee)
