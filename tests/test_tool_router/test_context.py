"""
Unit tests for conversation context construction.
"""

from types import SimpleNamespace

from ghl.tool_router import build_context


class TestBuildContext:
    """Test folding history into the detection text."""

    def test_no_history_returns_message(self):
        assert build_context("book a call") == "book a call"
        assert build_context("book a call", []) == "book a call"

    def test_history_prepended(self):
        history = [
            {'role': 'user', 'content': 'find Jane'},
            {'role': 'assistant', 'content': 'Found her.'},
        ]

        assert build_context("email her", history) == "find Jane Found her. email her"

    def test_only_last_three_turns(self):
        history = [{'content': c} for c in ['a', 'b', 'c', 'd']]

        assert build_context("now", history) == "b c d now"

    def test_missing_content_is_empty(self):
        history = [{'role': 'assistant'}, {'content': None}, {'content': 'x'}]

        assert build_context("now", history) == "  x now"

    def test_object_turns(self):
        history = [SimpleNamespace(role='user', content='schedule it')]

        assert build_context("tomorrow", history) == "schedule it tomorrow"

    def test_non_text_content_is_empty(self):
        history = [{'content': [{'type': 'image_url'}]}, {'content': 'hi'}]

        assert build_context("now", history) == " hi now"


# Run tests with: pytest tests/test_tool_router/test_context.py -v
