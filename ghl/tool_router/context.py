"""
Context construction from conversation history.

Folds the most recent turns into the text used for intent detection so a
follow-up like "and reschedule it" keeps the calendar intent alive.
"""

from typing import Any, Optional, Sequence

from .constants import CONTEXT_WINDOW


def _turn_content(turn: Any) -> str:
    """Text of one turn: dict key or attribute 'content', '' when missing."""
    if isinstance(turn, dict):
        content = turn.get('content')
    else:
        content = getattr(turn, 'content', None)
    return content if isinstance(content, str) else ''


def build_context(
    user_message: str,
    previous_messages: Optional[Sequence[Any]] = None
) -> str:
    """
    Build the detection text for a message.

    Args:
        user_message: Current user message
        previous_messages: Earlier turns, oldest first, with structure:
            [{'role': 'user'/'assistant', 'content': '...'}, ...]

    Returns:
        The last CONTEXT_WINDOW turns' content joined by single spaces,
        followed by the user message; the bare message without history
    """
    if not previous_messages:
        return user_message

    recent = list(previous_messages)[-CONTEXT_WINDOW:]
    history = ' '.join(_turn_content(turn) for turn in recent)
    return f"{history} {user_message}"
