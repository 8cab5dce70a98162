"""
Integration layer for the orchestration code.

Works on raw MCP tool dicts so callers can pass the catalogue straight
from a tools/list response and hand the result straight to an LLM client.
"""

from typing import Any, Dict, List, Optional, Sequence

from .. import config
from ..utils import log, summarize_names
from .categories import load_category_table
from .models import ToolDefinition, is_tool_dict
from .router import ToolRouter


# Singleton instance for convenience
_default_router = None


def get_default_router() -> ToolRouter:
    """
    Get the default global router instance.

    Uses the category table from GHL_CATEGORY_CONFIG when set, otherwise
    the built-in one. The router is stateless, so sharing it is safe.

    Returns:
        Singleton ToolRouter instance
    """
    global _default_router
    if _default_router is None:
        if config.settings.CATEGORY_CONFIG_PATH:
            log.info(f"[TOOL-ROUTER] Loading categories from {config.settings.CATEGORY_CONFIG_PATH}")
            _default_router = ToolRouter(load_category_table(config.settings.CATEGORY_CONFIG_PATH))
        else:
            _default_router = ToolRouter()
    return _default_router


def select_tool_schemas(
    raw_tools: Sequence[Dict[str, Any]],
    user_message: str,
    previous_messages: Optional[Sequence[Any]] = None,
    max_tools: Optional[int] = None,
    router: Optional[ToolRouter] = None
) -> List[Dict[str, Any]]:
    """
    Select tools from raw MCP tool dicts.

    Args:
        raw_tools: Tool dicts with 'name', 'description', 'inputSchema';
            entries without a string 'name' are skipped
        user_message: Current user message
        previous_messages: Recent conversation turns
        max_tools: Tool budget (defaults to GHL_MAX_TOOLS)
        router: ToolRouter to use (default router if None)

    Returns:
        The selected tools as dicts, in the same shape they came in

    Example:
        >>> schemas = select_tool_schemas(catalogue, "book a meeting with Jane")
        >>> len(schemas) <= 120
        True
    """
    if router is None:
        router = get_default_router()
    if max_tools is None:
        max_tools = config.settings.MAX_TOOLS

    by_name = {}
    tools = []
    for index, raw in enumerate(raw_tools):
        if not is_tool_dict(raw):
            log.warning(f"[TOOL-ROUTER] Skipping malformed tool entry #{index}")
            continue
        tool = ToolDefinition.from_dict(raw)
        by_name.setdefault(tool.name, raw)
        tools.append(tool)

    result = router.select_tools(tools, user_message, previous_messages, max_tools)

    log.info(f"[TOOL-ROUTER] Intents: {', '.join(result.detected_intents)}")
    log.info(f"[TOOL-ROUTER] Selected {result.tool_count} of {len(tools)} tools")
    log.debug(f"[TOOL-ROUTER] Tools: {summarize_names(result.tool_names)}")

    return [by_name[name] for name in result.tool_names]


def select_tool_names(
    raw_tools: Sequence[Dict[str, Any]],
    user_message: str,
    previous_messages: Optional[Sequence[Any]] = None,
    max_tools: Optional[int] = None
) -> List[str]:
    """
    Simplified interface that just returns the selected tool names.

    Example:
        >>> select_tool_names([{'name': 'send_sms'}, {'name': 'get_invoice'}], "send an sms")
        ['send_sms']
    """
    schemas = select_tool_schemas(raw_tools, user_message, previous_messages, max_tools)
    return [raw['name'] for raw in schemas]
