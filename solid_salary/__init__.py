"""solid-salary - SOLID principles demonstrated on a salary calculation."""

__version__ = "0.1.0"
