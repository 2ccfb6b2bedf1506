"""
Text Utilities

Helper functions for text processing and cleanup.
"""

from typing import Any


def clean_text(text: str) -> str:
    """Collapse whitespace runs to single spaces and trim."""
    if not text:
        return ""
    return ' '.join(text.split()).strip()


def truncate(text: Any, limit: int = 200) -> str:
    """Shorten a value's text for log previews."""
    if text is None:
        return ""
    text = str(text)
    if len(text) <= limit:
        return text
    return text[:limit] + "..."
