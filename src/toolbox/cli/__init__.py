"""CLI helpers for toolbox: Rich panels, file trees and help formatting."""

from toolbox.cli.formatting import (
    build_file_tree,
    format_error,
    format_success,
    format_warning,
)
from toolbox.cli.help_formatter import RichCommand, RichGroup, RichHelpFormatter

__all__ = [
    "RichCommand",
    "RichGroup",
    "RichHelpFormatter",
    "build_file_tree",
    "format_error",
    "format_success",
    "format_warning",
]
