"""A schema whose resolver reports errors carrying extensions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from gqlgo.ids import ID

SCHEMA = """
    schema {
        query: Query
    }
    type Query {
        droid(id: ID!): Droid!
    }
    # An autonomous mechanical character in the Star Wars universe
    type Droid {
        # The ID of the droid
        id: ID!
        # What others call this droid
        name: String!
    }
"""


@dataclass(frozen=True)
class Droid:
    id: ID
    name: str


DROIDS = [
    Droid(id=ID("2000"), name="C-3PO"),
    Droid(id=ID("2001"), name="R2-D2"),
]

_DROID_DATA = {droid.id: droid for droid in DROIDS}


class DroidResolver:
    """Resolves the fields of one droid."""

    def __init__(self, droid: Droid) -> None:
        self._droid = droid

    def id(self) -> ID:
        return self._droid.id

    def name(self) -> str:
        return self._droid.name


@dataclass
class DroidNotFoundError(Exception):
    """Raised when no droid has the requested ID."""

    code: str
    message: str

    __hash__ = Exception.__hash__

    def __post_init__(self) -> None:
        Exception.__init__(self, self.code, self.message)

    def __str__(self) -> str:
        return f"error [{self.code}]: {self.message}"

    def extensions(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message}


class Resolver:
    """Root resolver of the schema."""

    def droid(self, id: str) -> DroidResolver:
        found = _DROID_DATA.get(ID(id))
        if found is None:
            raise DroidNotFoundError(
                code="NotFound", message="This is not the droid you are looking for"
            )
        return DroidResolver(found)