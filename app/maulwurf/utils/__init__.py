"""Utility modules for maulwurf.

This module exports commonly used utility functions.
"""

from maulwurf.utils.formatting import (
    console,
    err_console,
    format_log_line,
    print_error,
    print_info,
    print_log,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "err_console",
    "format_log_line",
    "print_error",
    "print_info",
    "print_log",
    "print_success",
    "print_warning",
]
