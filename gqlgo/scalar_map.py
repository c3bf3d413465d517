"""A custom ``Map`` scalar holding an arbitrary input object."""

from __future__ import annotations

from typing import Any


class Map(dict):
    """A GraphQL ``Map`` scalar, held as a dict."""

    def implements_graphql_type(self, name: str) -> bool:
        """Return True if this type stands for the named GraphQL scalar."""
        return name == "Map"

    @classmethod
    def from_graphql(cls, value: Any) -> Map:
        """Build a Map from an input object value."""
        if not isinstance(value, dict):
            raise TypeError("wrong type")
        return cls(value)