"""Logging setup for the command line."""

import logging
import sys

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr so they never mix with program output.

    Args:
        verbose: Log at DEBUG instead of WARNING
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
    if verbose:
        logging.getLogger("solid_salary").setLevel(logging.DEBUG)
