"""An example schema of users who are admins, people and search results."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from gqlgo.ids import ID

SCHEMA = """
    schema {
        query: Query
    }

    type Query {
        admin(id: ID!, role: Role = ADMIN): Admin!
        user(id: ID!): User!
        search(text: String!): [SearchResult]!
    }

    interface Admin {
        id: ID!
        name: String!
        role: Role!
    }

    interface Person {
        name: String!
    }

    scalar Time

    type User implements Admin & Person {
        id: ID!
        name: String!
        email: String!
        role: Role!
        phone: String!
        address: [String!]
        friends(page: Pagination): [User]
        createdAt: Time!
    }

    input Pagination {
        first: Int
        last: Int
    }

    enum Role {
        ADMIN
        USER
    }

    union SearchResult = User
"""


@dataclass(frozen=True)
class Page:
    """Bounds of a page of friends; either bound may be left out."""

    first: float | None = None
    last: float | None = None


@dataclass
class Contact:
    """How to reach a user."""

    email: str
    phone: str


@dataclass(eq=False)
class User:
    """A user of the social schema."""

    id_field: str
    name_field: str
    role_field: str
    contact: Contact
    address: list[str] | None = None
    friends: list[User] = field(default_factory=list, repr=False)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def id(self) -> ID:
        return ID(self.id_field)

    def name(self) -> str:
        return self.name_field

    def role(self) -> str:
        return self.role_field

    @property
    def email(self) -> str:
        return self.contact.email

    @property
    def phone(self) -> str:
        return self.contact.phone

    def friends_resolver(self, page: Page | None = None) -> list[User]:
        """Return the friends within the page bounds.

        ``first`` is the index to start at; ``last`` is the index to stop
        before, where zero or a value past the end means the end.
        """
        count = len(self.friends)
        start, stop = 0, count
        if page is not None:
            if page.first is not None:
                start = int(page.first)
                if start > count:
                    raise ValueError("not enough users")
            if page.last is not None:
                stop = int(page.last)
                if stop == 0 or stop > count:
                    stop = count
        if not 0 <= start <= stop <= count:
            raise ValueError(
                f"slice bounds out of range [{start}:{stop}] with length {count}"
            )
        return self.friends[start:stop]


_ADMIN_FIELDS = frozenset({"id", "name", "role"})


class AdminResolver:
    """Resolves the Admin interface for a user."""

    def __init__(self, admin: User) -> None:
        self._admin = admin

    def __getattr__(self, name: str):
        if name in _ADMIN_FIELDS and "_admin" in self.__dict__:
            return getattr(self.__dict__["_admin"], name)
        raise AttributeError(name)

    def to_user(self) -> User | None:
        return self._admin if isinstance(self._admin, User) else None


class SearchResult:
    """Resolves the SearchResult union."""

    def __init__(self, result: object) -> None:
        self._result = result

    def to_user(self) -> User | None:
        return self._result if isinstance(self._result, User) else None


def _contact() -> Contact:
    return Contact(email="[email]", phone="[phone]")


USERS = [
    User(
        id_field="0x01",
        name_field="Albus Dumbledore",
        role_field="ADMIN",
        address=["Office @ Hogwarts", "where Horcruxes are"],
        contact=_contact(),
    ),
    User(
        id_field="0x02",
        name_field="Harry Potter",
        role_field="USER",
        address=["123 dorm room @ Hogwarts", "456 random place"],
        contact=_contact(),
    ),
    User(
        id_field="0x03",
        name_field="Hermione Granger",
        role_field="USER",
        address=["233 dorm room @ Hogwarts", "786 @ random place"],
        contact=_contact(),
    ),
    User(
        id_field="0x04",
        name_field="Ronald Weasley",
        role_field="USER",
        address=["411 dorm room @ Hogwarts", "981 @ random place"],
        contact=_contact(),
    ),
]

USERS[0].friends = [USERS[1]]
USERS[1].friends = [USERS[0], USERS[2], USERS[3]]
USERS[2].friends = [USERS[1], USERS[3]]
USERS[3].friends = [USERS[1], USERS[2]]

_USERS_MAP = {user.id_field: user for user in USERS}


class Resolver:
    """Root resolver of the social schema."""

    def admin(self, id: str, role: str = "ADMIN") -> AdminResolver:
        found = _USERS_MAP.get(id)
        if found is not None and found.role_field == role:
            return AdminResolver(found)
        raise LookupError(f"user with id={id} and role={role} does not exist")

    def user(self, id: str) -> User:
        found = _USERS_MAP.get(id)
        if found is None:
            raise LookupError(f"user with id={id} does not exist")
        return found

    def search(self, text: str) -> list[SearchResult]:
        return [SearchResult(user) for user in USERS if text in user.name_field]