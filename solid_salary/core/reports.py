"""Report generation and printing.

Generation and printing are separate contracts, so a class that only prints
never has to provide a ``generate_report`` method and vice versa.
"""

from abc import ABC, abstractmethod

import click

from solid_salary.core.employee import Employee


class ReportGenerator(ABC):
    """Produces a report for an employee."""

    @abstractmethod
    def generate_report(self, employee: Employee) -> None:
        """Generate the report for an employee.

        Args:
            employee: The employee the report is about
        """
        pass


class ReportPrinter(ABC):
    """Prints already generated report content."""

    @abstractmethod
    def print_report(self, report_content: str) -> None:
        """Print report content.

        Args:
            report_content: Text of the report, printed as given
        """
        pass


class ConsoleReportGenerator(ReportGenerator):
    """Announces report generation on stdout."""

    def generate_report(self, employee: Employee) -> None:
        click.echo(f"Generating report for {employee.name}")


class ConsoleReportPrinter(ReportPrinter):
    """Writes report content to stdout."""

    def print_report(self, report_content: str) -> None:
        click.echo(f"Printing report: {report_content}")
