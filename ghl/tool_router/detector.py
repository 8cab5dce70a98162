"""
Intent detection.

Maps free text to category names by keyword presence.
"""

from typing import Any, List, Optional

from .categories import CategoryTable, DEFAULT_CATEGORY_TABLE
from .constants import DEFAULT_INTENTS


def detect_intent(
    message: str,
    context: Optional[Any] = None,
    table: CategoryTable = DEFAULT_CATEGORY_TABLE
) -> List[str]:
    """
    Detect intents for a message.

    A category is detected when at least one of its keywords occurs as a
    substring of the lowercased message. Presence is binary: hit counts do
    not rank categories, and the result follows the table's order.

    Args:
        message: User text (optionally already folded with recent history)
        context: Reserved for detectors that need more than the text; unused
        table: Category table to match against

    Returns:
        Detected category names, or DEFAULT_INTENTS when nothing matches

    Example:
        >>> detect_intent("I need to schedule an appointment")
        ['calendar']
    """
    msg_lower = (message or '').lower()

    detected = [
        category.name
        for category in table
        if category.keyword_hits(msg_lower) > 0
    ]

    if not detected:
        return list(DEFAULT_INTENTS)

    return detected
