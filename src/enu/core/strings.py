"""
String utility functions for enu.

Provides label transformations used when handing options to model layers.
"""

from __future__ import annotations

import re

# Words kept upper-case when humanizing option names
_ACRONYMS = {"api", "id", "ui", "url", "sms", "http", "json"}


def humanize(name: str) -> str:
    """
    Convert an option identifier into a human-readable label.

    Args:
        name: Option identifier (snake_case or camelCase)

    Returns:
        Label with words capitalized

    Examples:
        >>> humanize("pending_review")
        'Pending Review'
        >>> humanize("awaitingApproval")
        'Awaiting Approval'
        >>> humanize("api_error")
        'API Error'
    """
    spaced = re.sub(r"(?<=[a-z0-9])(?=[A-Z])", " ", name)
    words = [word for word in re.split(r"[_\s]+", spaced) if word]
    return " ".join(
        word.upper() if word.lower() in _ACRONYMS else word.capitalize() for word in words
    )
