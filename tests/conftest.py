"""Pytest configuration and shared fixtures for solid-salary tests."""

import pytest

from solid_salary.calculators.basic import BasicSalaryCalculator
from solid_salary.calculators.bonus import BonusSalaryCalculator
from solid_salary.core.employee import Employee


@pytest.fixture
def employee() -> Employee:
    """The employee used by the demo run."""
    return Employee("Hamza", 5000)


@pytest.fixture
def basic_calculator() -> BasicSalaryCalculator:
    return BasicSalaryCalculator()


@pytest.fixture
def bonus_calculator() -> BonusSalaryCalculator:
    return BonusSalaryCalculator()

