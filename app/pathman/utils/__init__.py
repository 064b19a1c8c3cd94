"""Utility modules for pathman.

This module exports commonly used utility functions.
"""

from pathman.utils.formatting import (
    console,
    create_table,
    err_console,
    format_priority,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "create_table",
    "err_console",
    "format_priority",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
