"""
Integration tests for the ToolRouter facade.

Tests the complete selection pipeline against a realistic catalogue.
"""

from concurrent.futures import ThreadPoolExecutor

import pytest
from ghl.tool_router import (
    CategoryTable,
    DEFAULT_CATEGORY_TABLE,
    ToolRouter,
    ToolSelectionResult,
    get_tool_categories,
)


class TestSelectTools:
    """Test the complete selection pipeline."""

    def setup_method(self):
        """Setup test fixtures."""
        self.router = ToolRouter()

    def test_calendar_request(self, catalog):
        result = self.router.select_tools(catalog, "I need to schedule an appointment")

        assert isinstance(result, ToolSelectionResult)
        assert result.detected_intents == ['calendar']
        assert 'get_free_slots' in result.tool_names
        assert 'create_invoice' not in result.tool_names
        assert result.tool_count == len(result.tools)

    def test_unrelated_message_uses_default_intents(self, catalog):
        result = self.router.select_tools(catalog, "xyzzy")

        assert result.detected_intents == ['contact_management', 'communication', 'location']
        assert 'get_location' in result.tool_names
        assert 'send_sms' in result.tool_names

    def test_history_broadens_intents(self, catalog):
        history = [{'role': 'user', 'content': 'book an appointment'}]

        with_history = self.router.select_tools(catalog, "and move it to friday", history)
        without_history = self.router.select_tools(catalog, "and move it to friday")

        assert with_history.detected_intents == ['calendar']
        assert without_history.detected_intents == [
            'contact_management', 'communication', 'location'
        ]

    def test_history_window_is_three_turns(self, catalog):
        history = [
            {'role': 'user', 'content': 'send an invoice'},
            {'role': 'assistant', 'content': 'ok'},
            {'role': 'user', 'content': 'fine'},
            {'role': 'assistant', 'content': 'go on'},
        ]

        result = self.router.select_tools(catalog, "xyzzy", history)

        assert 'commerce' not in result.detected_intents

    def test_max_tools_respected(self, catalog):
        result = self.router.select_tools(catalog, "send an email campaign", max_tools=5)

        assert result.tool_count <= 5

    def test_empty_catalogue(self):
        result = self.router.select_tools([], "schedule a meeting")

        assert result.tools == []
        assert result.tool_count == 0
        assert result.detected_intents == ['calendar']

    def test_zero_budget(self, catalog):
        result = self.router.select_tools(catalog, "schedule a meeting", max_tools=0)

        assert result.tools == []


class TestSelectionProperties:
    """Test bound, determinism and uniqueness across many inputs."""

    MESSAGES = [
        "I need to schedule an appointment",
        "send an email campaign to every customer",
        "create an invoice for the new product and post it on facebook",
        "what does the pipeline report say about revenue",
        "xyzzy completely unrelated text",
        "",
    ]

    def setup_method(self):
        """Setup test fixtures."""
        self.router = ToolRouter()

    @pytest.mark.parametrize('message', MESSAGES)
    @pytest.mark.parametrize('max_tools', [1, 10, 50, 120])
    def test_bounded_and_unique(self, catalog, message, max_tools):
        result = self.router.select_tools(catalog, message, max_tools=max_tools)

        assert len(result.tools) <= max_tools
        assert len(set(result.tool_names)) == len(result.tool_names)

    @pytest.mark.parametrize('message', MESSAGES)
    def test_deterministic(self, catalog, message):
        history = [{'role': 'user', 'content': 'find my contacts'}]

        first = self.router.select_tools(catalog, message, history, 30)
        second = self.router.select_tools(catalog, message, history, 30)

        assert first == second

    def test_concurrent_calls_agree(self, catalog):
        message = "book a meeting and send a reminder sms"
        expected = self.router.select_tools(catalog, message).tool_names

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(
                lambda _: self.router.select_tools(catalog, message).tool_names,
                range(50)
            ))

        assert all(names == expected for names in results)


class TestToolCategories:
    """Test the reverse lookup."""

    def setup_method(self):
        """Setup test fixtures."""
        self.router = ToolRouter()

    @pytest.mark.parametrize('tool_name,expected', [
        ('get_contact_appointments', ['contact_management', 'calendar']),
        ('get_google_locations', ['location', 'social']),
        ('create_blog_post', ['content']),
        ('GET_INVOICE', ['commerce']),
        ('ping', []),
    ])
    def test_lookup(self, tool_name, expected):
        assert self.router.get_tool_categories(tool_name) == expected

    def test_consistent_with_patterns(self, catalog):
        for tool in catalog:
            categories = get_tool_categories(tool.name)
            for category in DEFAULT_CATEGORY_TABLE:
                if any(p in tool.name.lower() for p in category.tool_patterns):
                    assert category.name in categories

    def test_custom_table(self):
        table = CategoryTable.from_config([
            {'name': 'billing', 'keywords': ['invoice'], 'tool_patterns': ['invoice']},
        ])
        router = ToolRouter(table)

        assert router.get_tool_categories('create_invoice') == ['billing']
        assert router.get_tool_categories('get_contact') == []


class TestExplainSelection:
    """Test per-tool diagnostics."""

    def test_rows_cover_catalogue(self, catalog):
        router = ToolRouter()

        rows = router.explain_selection(catalog, "list products", max_tools=10)
        result = router.select_tools(catalog, "list products", max_tools=10)

        assert [row['name'] for row in rows] == [t.name for t in catalog]
        assert {row['name'] for row in rows if row['selected']} == set(result.tool_names)

    def test_rows_carry_categories(self, catalog):
        rows = ToolRouter().explain_selection(catalog, "list products")
        by_name = {row['name']: row for row in rows}

        assert by_name['create_product']['categories'] == ['commerce']
        assert by_name['create_product']['selected'] is True
        assert by_name['ping']['categories'] == []
        assert by_name['ping']['selected'] is False


# Run tests with: pytest tests/test_tool_router/test_router.py -v
