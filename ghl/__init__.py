"""
GHL Tool Router Package
=======================
Selects which GoHighLevel MCP tools to expose to an LLM that only accepts
a limited number of tool definitions.

Usage:
    from ghl import ToolRouter, load_tool_catalog
    from ghl.catalog import MCPCatalogClient
    from ghl.tool_router import detect_intent, filter_tools_by_intent
"""

__version__ = "1.0.0"

# Re-export commonly used items for convenience
from .utils import (
    # Logging
    setup_logger, log,
)

from .config import (
    Settings, settings,
)

from .tool_router import (
    # Data classes
    ToolDefinition, ToolCategory, ToolSelectionResult,
    # Router
    ToolRouter, get_default_router, get_tool_categories,
    select_tool_schemas, select_tool_names,
    # Errors
    ToolRouterError, CatalogError,
)

from .catalog import (
    # Catalogue loading
    MCPCatalogClient, parse_tool_list, load_tool_catalog, fetch_tool_catalog,
)
