"""Base class for all salary calculators."""

from abc import ABC, abstractmethod

from solid_salary.core.employee import Amount, Employee


class SalaryCalculator(ABC):
    """Base class for all salary calculators.

    A new calculation is added by subclassing this class in its own module.
    Existing calculators and the code that calls them stay untouched.
    """

    name: str  # e.g., "bonus"

    @abstractmethod
    def calculate_salary(self, employee: Employee) -> Amount:
        """Compute the pay amount for an employee.

        Args:
            employee: The employee to compute the salary for

        Returns:
            The computed salary
        """
        pass
