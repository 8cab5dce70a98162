"""
Tool filtering.

Turns a list of intents into a bounded subset of the tool catalogue.
"""

from typing import List, Sequence, Set

from .categories import CategoryTable, DEFAULT_CATEGORY_TABLE
from .constants import DEFAULT_MAX_TOOLS, GENERAL_TOOL_NAMES
from .models import ToolDefinition


def get_general_tools(all_tools: Sequence[ToolDefinition]) -> List[ToolDefinition]:
    """Catalogue tools whose exact name is on the general-purpose allowlist."""
    return [tool for tool in all_tools if tool.name in GENERAL_TOOL_NAMES]


def filter_tools_by_intent(
    all_tools: Sequence[ToolDefinition],
    intents: Sequence[str],
    max_tools: int = DEFAULT_MAX_TOOLS,
    table: CategoryTable = DEFAULT_CATEGORY_TABLE
) -> List[ToolDefinition]:
    """
    Select tools for the detected intents without exceeding max_tools.

    Each intent gets an even share of the budget, tightened by the
    category's own max_tools. Tools keep their catalogue order inside each
    intent's slice. Remaining room is topped up from the general allowlist.

    Args:
        all_tools: Full tool catalogue
        intents: Category names, in detection order
        max_tools: Upper bound on the returned list
        table: Category table used to resolve intent names

    Returns:
        Selected tools, no duplicate names, at most max_tools long
    """
    if max_tools <= 0 or not all_tools:
        return []

    per_intent_share = max_tools // (len(intents) or 1)

    selected: List[ToolDefinition] = []
    selected_names: Set[str] = set()

    for intent in intents:
        category = table.get(intent)
        if category is None:
            # Unknown intent names are advisory, not an error
            continue

        limit = min(category.max_tools or per_intent_share, per_intent_share)
        taken = 0
        for tool in all_tools:
            if taken >= limit:
                break
            if tool.name in selected_names or not category.matches_tool(tool.name):
                continue
            selected.append(tool)
            selected_names.add(tool.name)
            taken += 1

    if len(selected) < max_tools:
        for tool in get_general_tools(all_tools):
            if len(selected) >= max_tools:
                break
            if tool.name not in selected_names:
                selected.append(tool)
                selected_names.add(tool.name)

    return selected[:max_tools]
