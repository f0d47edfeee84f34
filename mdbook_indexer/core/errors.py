"""Error formatting and logging."""

import re
import sys
from datetime import datetime


def handle_error(e: Exception, context: str = "", log_to_stderr: bool = True) -> str:
    """Consistent error formatting for the preprocessor and tools.

    stdout carries the book JSON when running under mdBook, so errors are
    only ever logged to stderr.

    Args:
        e: Exception that occurred
        context: Where the error occurred (e.g., tool name, operation)
        log_to_stderr: Whether to log the error to stderr

    Returns:
        Formatted error message with filesystem paths removed
    """
    error_msg = f"Error: {type(e).__name__}"
    if context:
        error_msg += f" in {context}"

    error_str = str(e)
    # Windows paths (C:\..., R:\...)
    error_str = re.sub(r'[A-Z]:\\[^\s]+', '[path]', error_str)
    # Unix paths (/home/..., /usr/...)
    error_str = re.sub(r'/[\w/]+/[\w/]+', '[path]', error_str)

    error_msg += f": {error_str}"

    if log_to_stderr:
        timestamp = datetime.now().isoformat()
        print(f"[{timestamp}] {error_msg}", file=sys.stderr)

    return error_msg
