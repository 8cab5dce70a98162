"""
Main tool router facade.

Combines context construction, intent detection and tool filtering.
"""

from typing import Any, Dict, List, Optional, Sequence

from ..utils import log, summarize_names
from .categories import CategoryTable, DEFAULT_CATEGORY_TABLE
from .constants import DEFAULT_MAX_TOOLS
from .context import build_context
from .detector import detect_intent
from .filtering import filter_tools_by_intent
from .models import ToolDefinition, ToolSelectionResult


def get_tool_categories(
    tool_name: str,
    table: CategoryTable = DEFAULT_CATEGORY_TABLE
) -> List[str]:
    """Every category whose tool patterns match the tool name, in table order."""
    return [category.name for category in table if category.matches_tool(tool_name)]


class ToolRouter:
    """
    Smart tool selection for tool-count-limited LLM clients.

    Holds nothing but an immutable category table, so one instance can be
    shared across threads and requests.
    """

    def __init__(self, table: Optional[CategoryTable] = None):
        """Initialize the router with a category table (built-in by default)."""
        self.table = table if table is not None else DEFAULT_CATEGORY_TABLE

    def detect_intent(self, message: str, context: Optional[Any] = None) -> List[str]:
        """Detect category names for a message."""
        return detect_intent(message, context, self.table)

    def filter_tools_by_intent(
        self,
        all_tools: Sequence[ToolDefinition],
        intents: Sequence[str],
        max_tools: int = DEFAULT_MAX_TOOLS
    ) -> List[ToolDefinition]:
        """Bounded tool subset for the given intents."""
        return filter_tools_by_intent(all_tools, intents, max_tools, self.table)

    def get_tool_categories(self, tool_name: str) -> List[str]:
        """Reverse lookup: which categories claim this tool."""
        return get_tool_categories(tool_name, self.table)

    def select_tools(
        self,
        all_tools: Sequence[ToolDefinition],
        user_message: str,
        previous_messages: Optional[Sequence[Any]] = None,
        max_tools: int = DEFAULT_MAX_TOOLS
    ) -> ToolSelectionResult:
        """
        Main entry point for tool selection.

        Args:
            all_tools: Full tool catalogue
            user_message: Current user message
            previous_messages: Recent conversation turns for context
            max_tools: Upper bound on selected tools

        Returns:
            ToolSelectionResult with the tools, the detected intents and the count
        """
        full_context = build_context(user_message, previous_messages)

        intents = self.detect_intent(full_context)
        tools = self.filter_tools_by_intent(all_tools, intents, max_tools)

        log.debug(
            f"[TOOL-ROUTER] intents={intents} selected {len(tools)}/{len(all_tools)} "
            f"(max {max_tools}): {summarize_names(t.name for t in tools)}"
        )

        return ToolSelectionResult(
            tools=tools,
            detected_intents=intents,
            tool_count=len(tools)
        )

    def explain_selection(
        self,
        all_tools: Sequence[ToolDefinition],
        user_message: str,
        previous_messages: Optional[Sequence[Any]] = None,
        max_tools: int = DEFAULT_MAX_TOOLS
    ) -> List[Dict[str, Any]]:
        """
        Per-tool diagnostics for a selection.

        Returns:
            One dict per catalogue tool, in catalogue order:
            {'name': str, 'categories': List[str], 'selected': bool}
        """
        result = self.select_tools(all_tools, user_message, previous_messages, max_tools)
        selected = set(result.tool_names)

        return [
            {
                'name': tool.name,
                'categories': self.get_tool_categories(tool.name),
                'selected': tool.name in selected,
            }
            for tool in all_tools
        ]
