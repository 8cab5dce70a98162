"""
Category table.

The single source of truth for both intent detection and tool matching.
Adding a domain area means adding one entry to CATEGORY_DATA; the
selection logic never branches on category names.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from .exceptions import CategoryConfigError, DuplicateCategoryError
from .models import ToolCategory


CATEGORY_DATA: Tuple[Dict[str, Any], ...] = (
    {
        'name': 'contact_management',
        'keywords': ['contact', 'person', 'people', 'customer', 'client', 'lead', 'user'],
        'tool_patterns': ['contact', 'duplicate', 'follower'],
        'max_tools': 40,
    },
    {
        'name': 'communication',
        'keywords': ['message', 'email', 'sms', 'chat', 'conversation', 'send', 'reply', 'communicate'],
        'tool_patterns': ['conversation', 'message', 'email', 'sms'],
        'max_tools': 30,
    },
    {
        'name': 'sales',
        'keywords': ['opportunity', 'deal', 'pipeline', 'sale', 'revenue', 'close', 'won', 'lost'],
        'tool_patterns': ['opportunity', 'pipeline'],
        'max_tools': 20,
    },
    {
        'name': 'calendar',
        'keywords': ['appointment', 'calendar', 'schedule', 'meeting', 'event', 'availability', 'book'],
        'tool_patterns': ['calendar', 'appointment', 'slot', 'availability'],
        'max_tools': 40,
    },
    {
        'name': 'marketing',
        'keywords': ['campaign', 'workflow', 'automation', 'trigger', 'action', 'marketing'],
        'tool_patterns': ['campaign', 'workflow', 'trigger'],
        'max_tools': 20,
    },
    {
        'name': 'content',
        'keywords': ['blog', 'post', 'article', 'content', 'media', 'image', 'video'],
        'tool_patterns': ['blog', 'media', 'post'],
        'max_tools': 20,
    },
    {
        'name': 'commerce',
        'keywords': ['product', 'price', 'store', 'payment', 'invoice', 'order', 'subscription'],
        'tool_patterns': ['product', 'price', 'store', 'payment', 'invoice', 'order'],
        'max_tools': 30,
    },
    {
        'name': 'location',
        'keywords': ['location', 'business', 'company', 'settings', 'configuration'],
        'tool_patterns': ['location'],
        'max_tools': 25,
    },
    {
        'name': 'analytics',
        'keywords': ['report', 'analytics', 'stats', 'metrics', 'data', 'survey', 'feedback'],
        'tool_patterns': ['survey', 'report', 'stats'],
        'max_tools': 15,
    },
    {
        'name': 'social',
        'keywords': ['social', 'facebook', 'instagram', 'google', 'review', 'post'],
        'tool_patterns': ['social', 'oauth', 'facebook', 'instagram', 'google'],
        'max_tools': 20,
    },
)


def _category_from_entry(entry: Dict[str, Any]) -> ToolCategory:
    """Build a ToolCategory from a config dict (snake_case or camelCase keys)."""
    if not isinstance(entry, dict):
        raise CategoryConfigError(f"Category entry must be an object, got {type(entry).__name__}")

    name = entry.get('name')
    if not name or not isinstance(name, str):
        raise CategoryConfigError(f"Category entry without a name: {entry!r}")

    keywords = entry.get('keywords', [])
    patterns = entry.get('tool_patterns', entry.get('toolPatterns', []))
    for label, values in (('keywords', keywords), ('tool_patterns', patterns)):
        if not isinstance(values, (list, tuple)) or not all(isinstance(v, str) for v in values):
            raise CategoryConfigError(f"Category {name!r}: {label} must be a list of strings")

    max_tools = entry.get('max_tools', entry.get('maxTools'))
    if max_tools is not None and (isinstance(max_tools, bool) or not isinstance(max_tools, int)):
        raise CategoryConfigError(f"Category {name!r}: max_tools must be an integer")

    return ToolCategory(
        name=name,
        keywords=tuple(keywords),
        tool_patterns=tuple(patterns),
        max_tools=max_tools,
    )


class CategoryTable:
    """
    Immutable, ordered collection of tool categories.

    Iteration follows declaration order, which makes detected intents
    deterministic across calls. Built once and shared read-only.
    """

    def __init__(self, categories: Iterable[ToolCategory]):
        by_name: Dict[str, ToolCategory] = {}
        for category in categories:
            if category.name in by_name:
                raise DuplicateCategoryError(category.name)
            by_name[category.name] = category
        self._categories = tuple(by_name.values())
        self._by_name = by_name

    @classmethod
    def from_config(cls, entries: Iterable[Dict[str, Any]]) -> 'CategoryTable':
        """Build a table from plain dicts, as loaded from JSON."""
        return cls(_category_from_entry(entry) for entry in entries)

    def get(self, name: str) -> Optional[ToolCategory]:
        """Get category by name (None if unknown)."""
        return self._by_name.get(name)

    def names(self) -> List[str]:
        """Category names in declaration order."""
        return [category.name for category in self._categories]

    def __iter__(self) -> Iterator[ToolCategory]:
        return iter(self._categories)

    def __len__(self) -> int:
        return len(self._categories)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __repr__(self) -> str:
        return f"CategoryTable({', '.join(self.names())})"


def load_category_table(path: Union[str, Path]) -> CategoryTable:
    """
    Load a category table from a JSON file.

    The file holds either a list of category objects or
    ``{"categories": [...]}``.
    """
    path = Path(path)
    try:
        with path.open('r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise CategoryConfigError(f"Cannot read category table {path}: {e}") from e

    if isinstance(data, dict):
        data = data.get('categories')
    if not isinstance(data, list):
        raise CategoryConfigError(f"Category table {path} must contain a list of categories")

    return CategoryTable.from_config(data)


DEFAULT_CATEGORY_TABLE = CategoryTable.from_config(CATEGORY_DATA)
