"""
GHL Tool Router
===============

Picks which GoHighLevel tools to expose to a tool-count-limited LLM.

Package Structure:
    models.py           - ToolDefinition, ToolCategory, ToolSelectionResult
    constants.py        - Budgets, default intents, general tool allowlist
    categories.py       - The category table (keywords + tool name patterns)
    detector.py         - Message -> category names
    filtering.py        - Category names -> bounded tool list
    context.py          - Folding recent conversation turns into the message
    router.py           - ToolRouter facade
    integration.py      - Raw MCP dict helpers and the default router
    exceptions.py       - Config and catalogue errors
"""

from .models import ToolDefinition, ToolCategory, ToolSelectionResult
from .constants import DEFAULT_MAX_TOOLS, DEFAULT_INTENTS, GENERAL_TOOL_NAMES
from .categories import CategoryTable, DEFAULT_CATEGORY_TABLE, load_category_table
from .detector import detect_intent
from .filtering import filter_tools_by_intent, get_general_tools
from .context import build_context
from .router import ToolRouter, get_tool_categories
from .integration import get_default_router, select_tool_schemas, select_tool_names
from .exceptions import (
    ToolRouterError,
    CategoryConfigError,
    DuplicateCategoryError,
    CatalogError,
)

__all__ = [
    # Data models
    'ToolDefinition',
    'ToolCategory',
    'ToolSelectionResult',

    # Constants
    'DEFAULT_MAX_TOOLS',
    'DEFAULT_INTENTS',
    'GENERAL_TOOL_NAMES',

    # Category table
    'CategoryTable',
    'DEFAULT_CATEGORY_TABLE',
    'load_category_table',

    # Pipeline stages
    'detect_intent',
    'filter_tools_by_intent',
    'get_general_tools',
    'build_context',
    'get_tool_categories',

    # Main router
    'ToolRouter',

    # Integration
    'get_default_router',
    'select_tool_schemas',
    'select_tool_names',

    # Errors
    'ToolRouterError',
    'CategoryConfigError',
    'DuplicateCategoryError',
    'CatalogError',
]

__version__ = '1.0.0'
