"""A small schema whose resolvers give cache hints."""

from __future__ import annotations

from gqlgo.cache import Hint, Scope, add_hint, ttl

SCHEMA = """
    schema {
        query: Query
    }

    type Query {
        hello(name: String!): String!
        me: UserProfile!
    }

    type UserProfile {
        name: String!
    }
"""


class UserProfile:
    """The profile of the current user."""

    def __init__(self, name: str) -> None:
        self._name = name

    def name(self) -> str:
        return self._name


class Resolver:
    """Root resolver of the caching schema."""

    def hello(self, name: str) -> str:
        add_hint(Hint(max_age=ttl(60 * 60), scope=Scope.PUBLIC))
        return f"Hello {name}!"

    def me(self) -> UserProfile:
        add_hint(Hint(max_age=ttl(60), scope=Scope.PRIVATE))
        return UserProfile("World")