"""
Data models for tool routing.

Defines the core data structures used throughout the tool router.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Tuple


def _lowered(values: Iterable[str]) -> Tuple[str, ...]:
    return tuple(v.lower() for v in values)


def is_tool_dict(raw: Any) -> bool:
    """True if raw looks like an MCP tool entry (a dict with a string name)."""
    return isinstance(raw, dict) and isinstance(raw.get('name'), str)


@dataclass(frozen=True)
class ToolDefinition:
    """One remote operation from the external tool catalogue."""

    name: str
    description: Optional[str] = None
    input_schema: Dict[str, Any] = field(default_factory=lambda: {'type': 'object'})
    metadata: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> ToolDefinition:
        """
        Build a definition from an MCP-style tool dict.

        Known keys are ``name``, ``description`` and ``inputSchema``
        (``input_schema`` is accepted too); everything else lands in
        ``metadata``.
        """
        extra = {
            k: v for k, v in raw.items()
            if k not in ('name', 'description', 'inputSchema', 'input_schema')
        }
        schema = raw.get('inputSchema', raw.get('input_schema')) or {'type': 'object'}
        return cls(
            name=raw['name'],
            description=raw.get('description'),
            input_schema=dict(schema),
            metadata=extra,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Inverse of from_dict, in MCP key style."""
        data: Dict[str, Any] = dict(self.metadata)
        data['name'] = self.name
        if self.description is not None:
            data['description'] = self.description
        data['inputSchema'] = dict(self.input_schema)
        return data

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"ToolDefinition(name={self.name})"


@dataclass(frozen=True)
class ToolCategory:
    """
    A named grouping of tools.

    ``keywords`` detect the category in user text; ``tool_patterns`` are
    substrings matched against tool names. ``max_tools`` is a soft cap that
    can only tighten the even per-intent share.
    """

    name: str
    keywords: Tuple[str, ...]
    tool_patterns: Tuple[str, ...]
    max_tools: Optional[int] = None

    def __post_init__(self):
        # Frozen dataclass: normalise through object.__setattr__
        object.__setattr__(self, 'keywords', _lowered(self.keywords))
        object.__setattr__(self, 'tool_patterns', _lowered(self.tool_patterns))

    def keyword_hits(self, msg_lower: str) -> int:
        """Number of keywords occurring in an already lowercased message."""
        return sum(1 for keyword in self.keywords if keyword in msg_lower)

    def matches_tool(self, tool_name: str) -> bool:
        """True if any tool pattern is a substring of the tool name."""
        name_lower = tool_name.lower()
        return any(pattern in name_lower for pattern in self.tool_patterns)


@dataclass(frozen=True)
class ToolSelectionResult:
    """Result of one routing call."""

    tools: List[ToolDefinition]
    detected_intents: List[str]
    tool_count: int

    @property
    def tool_names(self) -> List[str]:
        return [tool.name for tool in self.tools]

    def __repr__(self) -> str:
        return (
            f"ToolSelectionResult(intents={self.detected_intents}, "
            f"tools={self.tool_count})"
        )
