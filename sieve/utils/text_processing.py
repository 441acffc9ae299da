"""
Text processing utilities for formatting and display.
"""

from typing import Iterable


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Args:
        text: Text to truncate
        max_len: Maximum length including ellipsis

    Returns:
        Original text if within max_len, otherwise truncated with "..."

    Example:
        >>> truncate_display("Short", 10)
        'Short'
        >>> truncate_display("This is a very long string", 10)
        'This is...'
    """
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."


def join_labels(labels: Iterable[str]) -> str:
    """
    Join labels with single spaces, skipping blanks.

    Example:
        >>> join_labels(["js", " ", "Web Dev "])
        'js Web Dev'
    """
    return " ".join(label.strip() for label in labels if label and label.strip())
