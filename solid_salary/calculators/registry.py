"""Calculator registry for looking up salary calculators by name."""

import importlib
import pkgutil
from pathlib import Path
from typing import Dict, List, Type

from solid_salary.calculators.base import SalaryCalculator

_registry: Dict[str, Type[SalaryCalculator]] = {}

# Modules in this package that do not define calculators
_SKIP_MODULES = {"base", "registry"}


def register_calculator(calculator_class: Type[SalaryCalculator]) -> None:
    """Register a calculator class.

    Args:
        calculator_class: The calculator class to register

    Raises:
        ValueError: If calculator_class doesn't have a name attribute
    """
    if not hasattr(calculator_class, "name"):
        raise ValueError(
            f"Calculator class {calculator_class.__name__} must have a 'name' attribute"
        )
    _registry[calculator_class.name] = calculator_class


def get_calculator(name: str) -> Type[SalaryCalculator]:
    """Get a calculator class by name.

    Args:
        name: The name of the calculator

    Returns:
        The calculator class

    Raises:
        ValueError: If calculator is not registered
    """
    if name not in _registry:
        raise ValueError(f"Unknown calculator: {name}")
    return _registry[name]


def calculator_names() -> List[str]:
    """Return the names of all registered calculators, sorted."""
    return sorted(_registry)


def create_calculator(name: str) -> SalaryCalculator:
    """Instantiate a registered calculator.

    Args:
        name: The name of the calculator

    Raises:
        ValueError: If calculator is not registered
    """
    return get_calculator(name)()


def discover_and_register_calculators() -> None:
    """Import every calculator module in this package.

    Each module calls register_calculator() at import time, so importing it is
    enough to make the calculator available by name.
    """
    package_dir = Path(__file__).parent
    for module_info in pkgutil.iter_modules([str(package_dir)]):
        if module_info.name.startswith("_") or module_info.name in _SKIP_MODULES:
            continue
        importlib.import_module(f"solid_salary.calculators.{module_info.name}")
