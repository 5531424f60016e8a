"""Salary calculation strategies."""
