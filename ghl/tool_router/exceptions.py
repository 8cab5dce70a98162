"""
Exceptions raised by the tool router package.

Selection itself never raises; these cover configuration and catalogue I/O.
"""


class ToolRouterError(Exception):
    """Base class for all tool router errors."""


class CategoryConfigError(ToolRouterError):
    """A category table entry is malformed."""


class DuplicateCategoryError(CategoryConfigError):
    """Two categories in one table share a name."""

    def __init__(self, name: str):
        super().__init__(f"Duplicate category name: {name!r}")
        self.name = name


class CatalogError(ToolRouterError):
    """The tool catalogue could not be loaded or fetched."""
