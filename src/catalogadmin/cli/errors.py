"""
Standardized error message helpers for CLI commands.

Error Format:
    Title -> Problem -> Hint

Examples:
    >>> format_error("Not Found", "Unknown resource actors")
    'Error: Not Found: Unknown resource actors'
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.panel import Panel

from catalogadmin.exceptions import (
    EXIT_CODE_API_UNAVAILABLE,
    EXIT_CODE_GENERAL_ERROR,
    EXIT_CODE_INVALID_ARGS,
)

# Module-level console for CLI error display
console = Console()


class ErrorCategory:
    """
    Standard error categories for CLI commands.

    - NOT_FOUND: Resource does not exist
    - VALIDATION: Input format or value validation failed
    - API: The catalog API could not be reached or failed
    - DATABASE: Database operation failed
    """

    NOT_FOUND = "Not Found"
    VALIDATION = "Validation"
    API = "API"
    DATABASE = "Database"


def get_exit_code_for_category(category: str) -> int:
    """
    Map error category to appropriate exit code.

    Examples
    --------
    >>> get_exit_code_for_category(ErrorCategory.VALIDATION)
    2
    >>> get_exit_code_for_category(ErrorCategory.API)
    3
    """
    category_to_exit_code = {
        ErrorCategory.NOT_FOUND: EXIT_CODE_INVALID_ARGS,
        ErrorCategory.VALIDATION: EXIT_CODE_INVALID_ARGS,
        ErrorCategory.API: EXIT_CODE_API_UNAVAILABLE,
        ErrorCategory.DATABASE: EXIT_CODE_GENERAL_ERROR,
    }
    return category_to_exit_code.get(category, EXIT_CODE_GENERAL_ERROR)


def format_error(category: str, message: str, hint: Optional[str] = None) -> str:
    """
    Format error message in the standardized format.

    Parameters
    ----------
    category : str
        Error category; use ErrorCategory constants for consistency.
    message : str
        Human-readable error description.
    hint : Optional[str]
        Actionable suggestion for resolving the error.

    Returns
    -------
    str
        Formatted error message string.
    """
    lines = [f"Error: {category}: {message}"]
    if hint is not None:
        lines.append(f"   Hint: {hint}")
    return "\n".join(lines)


def display_error(category: str, message: str, hint: Optional[str] = None) -> None:
    """Print a formatted error inside a red panel."""
    console.print(
        Panel(
            format_error(category, message, hint=hint),
            title=category,
            border_style="red",
        )
    )
