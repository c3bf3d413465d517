"""The GraphQL ``ID`` scalar."""

from __future__ import annotations

import json
from typing import Any


class ID(str):
    """GraphQL's ``ID`` scalar, held as a string."""

    def implements_graphql_type(self, name: str) -> bool:
        """Return True if this type stands for the named GraphQL scalar."""
        return name == "ID"

    @classmethod
    def from_graphql(cls, value: Any) -> ID:
        """Build an ID from a string or integer input value."""
        if isinstance(value, str):
            return cls(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(str(value))
        raise TypeError(f"wrong type for ID: {type(value).__name__}")

    def to_json(self) -> str:
        """Return the ID as a quoted JSON string."""
        return json.dumps(str(self), ensure_ascii=False)