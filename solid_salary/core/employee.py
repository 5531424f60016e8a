"""Employee record."""

from dataclasses import dataclass
from typing import Union

Amount = Union[int, float]


@dataclass
class Employee:
    """Holds employee data and nothing else.

    Args:
        name: Display name of the employee
        basic_salary: Base salary before any calculation is applied
    """

    name: str
    basic_salary: Amount
