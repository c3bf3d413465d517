"""The interface of types mapped to custom GraphQL scalars."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Unmarshaler(Protocol):
    """A Python type that stands for a custom GraphQL scalar type."""

    def implements_graphql_type(self, name: str) -> bool:
        """Map the implementing type to the named scalar in the schema."""
        ...

    def unmarshal_graphql(self, value: Any) -> None:
        """Take the value of the scalar when it is used as an input."""
        ...


def implements_unmarshaler(obj: Any) -> bool:
    """Return True if ``obj`` can stand for a custom scalar.

    Mutable types provide ``unmarshal_graphql``; immutable ones provide a
    ``from_graphql`` constructor instead. Either is accepted.
    """
    if not callable(getattr(obj, "implements_graphql_type", None)):
        return False
    return callable(getattr(obj, "unmarshal_graphql", None)) or callable(
        getattr(obj, "from_graphql", None)
    )