"""Utility modules for srdfilter.

This module exports commonly used utility functions.
"""

from srdfilter.utils.formatting import (
    configure_logging,
    console,
    err_console,
    print_error,
    print_success,
)

__all__ = [
    "configure_logging",
    "console",
    "err_console",
    "print_error",
    "print_success",
]
