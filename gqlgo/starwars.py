"""An example schema and resolvers built around Star Wars characters."""

from __future__ import annotations

import base64
import binascii
import re
from collections import defaultdict
from dataclasses import dataclass
from typing import Union

from gqlgo.ids import ID

SCHEMA = """
    schema {
        query: Query
        mutation: Mutation
    }
    # The query type, represents all of the entry points into our object graph
    type Query {
        hero(episode: Episode = NEWHOPE): Character
        reviews(episode: Episode!): [Review]!
        search(text: String!): [SearchResult]!
        character(id: ID!): Character
        droid(id: ID!): Droid
        human(id: ID!): Human
        starship(id: ID!): Starship
    }
    # The mutation type, represents all updates we can make to our data
    type Mutation {
        createReview(episode: Episode!, review: ReviewInput!): Review
    }
    # The episodes in the Star Wars trilogy
    enum Episode {
        # Star Wars Episode IV: A New Hope, released in 1977.
        NEWHOPE
        # Star Wars Episode V: The Empire Strikes Back, released in 1980.
        EMPIRE
        # Star Wars Episode VI: Return of the Jedi, released in 1983.
        JEDI
    }
    # A character from the Star Wars universe
    interface Character {
        # The ID of the character
        id: ID!
        # The name of the character
        name: String!
        # The friends of the character, or an empty list if they have none
        friends: [Character]
        # The friends of the character exposed as a connection with edges
        friendsConnection(first: Int, after: ID): FriendsConnection!
        # The movies this character appears in
        appearsIn: [Episode!]!
    }
    # Units of height
    enum LengthUnit {
        # The standard unit around the world
        METER
        # Primarily used in the United States
        FOOT
    }
    # A humanoid creature from the Star Wars universe
    type Human implements Character {
        # The ID of the human
        id: ID!
        # What this human calls themselves
        name: String!
        # Height in the preferred unit, default is meters
        height(unit: LengthUnit = METER): Float!
        # Mass in kilograms, or null if unknown
        mass: Float
        # This human's friends, or an empty list if they have none
        friends: [Character]
        # The friends of the human exposed as a connection with edges
        friendsConnection(first: Int, after: ID): FriendsConnection!
        # The movies this human appears in
        appearsIn: [Episode!]!
        # A list of starships this person has piloted, or an empty list if none
        starships: [Starship]
    }
    # An autonomous mechanical character in the Star Wars universe
    type Droid implements Character {
        # The ID of the droid
        id: ID!
        # What others call this droid
        name: String!
        # This droid's friends, or an empty list if they have none
        friends: [Character]
        # The friends of the droid exposed as a connection with edges
        friendsConnection(first: Int, after: ID): FriendsConnection!
        # The movies this droid appears in
        appearsIn: [Episode!]!
        # This droid's primary function
        primaryFunction: String
    }
    # A connection object for a character's friends
    type FriendsConnection {
        # The total number of friends
        totalCount: Int!
        # The edges for each of the character's friends.
        edges: [FriendsEdge]
        # A list of the friends, as a convenience when edges are not needed.
        friends: [Character]
        # Information for paginating this connection
        pageInfo: PageInfo!
    }
    # An edge object for a character's friends
    type FriendsEdge {
        # A cursor used for pagination
        cursor: ID!
        # The character represented by this friendship edge
        node: Character
    }
    # Information for paginating this connection
    type PageInfo {
        startCursor: ID
        endCursor: ID
        hasNextPage: Boolean!
    }
    # Represents a review for a movie
    type Review {
        # The number of stars this review gave, 1-5
        stars: Int!
        # Comment about the movie
        commentary: String
    }
    # The input object sent when someone is creating a new review
    input ReviewInput {
        # 0-5 stars
        stars: Int!
        # Comment about the movie, optional
        commentary: String
    }
    type Starship {
        # The ID of the starship
        id: ID!
        # The name of the starship
        name: String!
        # Length of the starship, along the longest axis
        length(unit: LengthUnit = METER): Float!
    }
    union SearchResult = Human | Droid | Starship
"""


def _ids(*values: str) -> tuple[ID, ...]:
    return tuple(ID(value) for value in values)


_ALL_EPISODES = ("NEWHOPE", "EMPIRE", "JEDI")


@dataclass(frozen=True)
class Human:
    id: ID
    name: str
    friends: tuple[ID, ...]
    appears_in: tuple[str, ...]
    height: float
    mass: int
    starships: tuple[ID, ...] = ()


@dataclass(frozen=True)
class Droid:
    id: ID
    name: str
    friends: tuple[ID, ...]
    appears_in: tuple[str, ...]
    primary_function: str


@dataclass(frozen=True)
class Starship:
    id: ID
    name: str
    length: float


@dataclass(frozen=True)
class Review:
    stars: int
    commentary: str | None = None


@dataclass(frozen=True)
class ReviewInput:
    stars: int
    commentary: str | None = None


HUMANS = (
    Human(
        id=ID("1000"),
        name="Luke Skywalker",
        friends=_ids("1002", "1003", "2000", "2001"),
        appears_in=_ALL_EPISODES,
        height=1.72,
        mass=77,
        starships=_ids("3001", "3003"),
    ),
    Human(
        id=ID("1001"),
        name="Darth Vader",
        friends=_ids("1004"),
        appears_in=_ALL_EPISODES,
        height=2.02,
        mass=136,
        starships=_ids("3002"),
    ),
    Human(
        id=ID("1002"),
        name="Han Solo",
        friends=_ids("1000", "1003", "2001"),
        appears_in=_ALL_EPISODES,
        height=1.8,
        mass=80,
        starships=_ids("3000", "3003"),
    ),
    Human(
        id=ID("1003"),
        name="Leia Organa",
        friends=_ids("1000", "1002", "2000", "2001"),
        appears_in=_ALL_EPISODES,
        height=1.5,
        mass=49,
    ),
    Human(
        id=ID("1004"),
        name="Wilhuff Tarkin",
        friends=_ids("1001"),
        appears_in=("NEWHOPE",),
        height=1.8,
        mass=0,
    ),
)

DROIDS = (
    Droid(
        id=ID("2000"),
        name="C-3PO",
        friends=_ids("1000", "1002", "1003", "2001"),
        appears_in=_ALL_EPISODES,
        primary_function="Protocol",
    ),
    Droid(
        id=ID("2001"),
        name="R2-D2",
        friends=_ids("1000", "1002", "1003"),
        appears_in=_ALL_EPISODES,
        primary_function="Astromech",
    ),
)

STARSHIPS = (
    Starship(id=ID("3000"), name="Millennium Falcon", length=34.37),
    Starship(id=ID("3001"), name="X-Wing", length=12.5),
    Starship(id=ID("3002"), name="TIE Advanced x1", length=9.2),
    Starship(id=ID("3003"), name="Imperial shuttle", length=20.0),
)

_HUMAN_DATA = {human.id: human for human in HUMANS}
_DROID_DATA = {droid.id: droid for droid in DROIDS}
_STARSHIP_DATA = {ship.id: ship for ship in STARSHIPS}


def convert_length(meters: float, unit: str) -> float:
    """Convert a length in meters to the given unit, METER or FOOT."""
    if unit == "METER":
        return meters
    if unit == "FOOT":
        return meters * 3.28084
    raise ValueError("invalid unit")


def encode_cursor(index: int) -> ID:
    """Return the opaque cursor of the item at the zero-based ``index``."""
    raw = f"cursor{index + 1}".encode("ascii")
    return ID(base64.b64encode(raw).decode("ascii"))


_CURSOR_NUMBER = re.compile(r"[+-]?[0-9]+")


def _decode_cursor(cursor: str) -> int:
    try:
        raw = base64.b64decode(cursor, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError, ValueError) as exc:
        raise ValueError(f"invalid cursor {cursor!r}") from exc
    number = raw.removeprefix("cursor")
    if not _CURSOR_NUMBER.fullmatch(number):
        raise ValueError(f"invalid cursor {cursor!r}")
    return int(number)


class StarshipResolver:
    """Resolves the fields of one starship."""

    def __init__(self, starship: Starship) -> None:
        self._starship = starship

    def id(self) -> ID:
        return self._starship.id

    def name(self) -> str:
        return self._starship.name

    def length(self, unit: str = "METER") -> float:
        return convert_length(self._starship.length, unit)


class HumanResolver:
    """Resolves the fields of one human."""

    def __init__(self, human: Human) -> None:
        self._human = human

    def id(self) -> ID:
        return self._human.id

    def name(self) -> str:
        return self._human.name

    def height(self, unit: str = "METER") -> float:
        return convert_length(self._human.height, unit)

    def mass(self) -> float | None:
        """Mass in kilograms, or None when it is unknown."""
        if self._human.mass == 0:
            return None
        return float(self._human.mass)

    def friends(self) -> list[CharacterResolver]:
        return resolve_characters(self._human.friends)

    def friends_connection(
        self, first: int | None = None, after: str | None = None
    ) -> FriendsConnectionResolver:
        return new_friends_connection(self._human.friends, first, after)

    def appears_in(self) -> list[str]:
        return list(self._human.appears_in)

    def starships(self) -> list[StarshipResolver]:
        return [StarshipResolver(_STARSHIP_DATA[sid]) for sid in self._human.starships]


class DroidResolver:
    """Resolves the fields of one droid."""

    def __init__(self, droid: Droid) -> None:
        self._droid = droid

    def id(self) -> ID:
        return self._droid.id

    def name(self) -> str:
        return self._droid.name

    def friends(self) -> list[CharacterResolver]:
        return resolve_characters(self._droid.friends)

    def friends_connection(
        self, first: int | None = None, after: str | None = None
    ) -> FriendsConnectionResolver:
        return new_friends_connection(self._droid.friends, first, after)

    def appears_in(self) -> list[str]:
        return list(self._droid.appears_in)

    def primary_function(self) -> str | None:
        return self._droid.primary_function or None


_CHARACTER_FIELDS = frozenset(
    {"id", "name", "friends", "friends_connection", "appears_in"}
)


class CharacterResolver:
    """Resolves the Character interface for a human or a droid."""

    def __init__(self, character: Union[HumanResolver, DroidResolver]) -> None:
        self._character = character

    def __getattr__(self, name: str):
        if name in _CHARACTER_FIELDS and "_character" in self.__dict__:
            return getattr(self.__dict__["_character"], name)
        raise AttributeError(name)

    def to_human(self) -> HumanResolver | None:
        character = self._character
        return character if isinstance(character, HumanResolver) else None

    def to_droid(self) -> DroidResolver | None:
        character = self._character
        return character if isinstance(character, DroidResolver) else None


class SearchResultResolver:
    """Resolves the SearchResult union."""

    def __init__(
        self, result: Union[HumanResolver, DroidResolver, StarshipResolver]
    ) -> None:
        self._result = result

    def to_human(self) -> HumanResolver | None:
        return self._result if isinstance(self._result, HumanResolver) else None

    def to_droid(self) -> DroidResolver | None:
        return self._result if isinstance(self._result, DroidResolver) else None

    def to_starship(self) -> StarshipResolver | None:
        return self._result if isinstance(self._result, StarshipResolver) else None


class ReviewResolver:
    """Resolves the fields of one review."""

    def __init__(self, review: Review) -> None:
        self._review = review

    def stars(self) -> int:
        return self._review.stars

    def commentary(self) -> str | None:
        return self._review.commentary


def resolve_character(id: str) -> CharacterResolver | None:
    """Return the human or droid with the given ID, or None."""
    key = ID(id)
    if key in _HUMAN_DATA:
        return CharacterResolver(HumanResolver(_HUMAN_DATA[key]))
    if key in _DROID_DATA:
        return CharacterResolver(DroidResolver(_DROID_DATA[key]))
    return None


def resolve_characters(ids) -> list[CharacterResolver]:
    """Return the characters for the IDs, skipping those that are unknown."""
    return [c for c in map(resolve_character, ids) if c is not None]


class FriendsEdgeResolver:
    """One edge of a friends connection."""

    def __init__(self, cursor: ID, id: ID) -> None:
        self._cursor = cursor
        self._id = id

    def cursor(self) -> ID:
        return self._cursor

    def node(self) -> CharacterResolver | None:
        return resolve_character(self._id)


class PageInfoResolver:
    """Pagination information of a friends connection."""

    def __init__(self, start_cursor: ID, end_cursor: ID, has_next_page: bool) -> None:
        self._start_cursor = start_cursor
        self._end_cursor = end_cursor
        self._has_next_page = has_next_page

    def start_cursor(self) -> ID:
        return self._start_cursor

    def end_cursor(self) -> ID:
        return self._end_cursor

    def has_next_page(self) -> bool:
        return self._has_next_page


class FriendsConnectionResolver:
    """A window over a character's friends."""

    def __init__(self, ids, start: int, stop: int) -> None:
        self._ids = tuple(ids)
        self._from = start
        self._to = stop

    def _window(self) -> tuple[ID, ...]:
        if not 0 <= self._from <= self._to <= len(self._ids):
            raise ValueError(
                f"slice bounds out of range [{self._from}:{self._to}]"
                f" with length {len(self._ids)}"
            )
        return self._ids[self._from : self._to]

    def total_count(self) -> int:
        return len(self._ids)

    def edges(self) -> list[FriendsEdgeResolver]:
        return [
            FriendsEdgeResolver(encode_cursor(index), fid)
            for index, fid in enumerate(self._window(), start=self._from)
        ]

    def friends(self) -> list[CharacterResolver]:
        return resolve_characters(self._window())

    def page_info(self) -> PageInfoResolver:
        return PageInfoResolver(
            start_cursor=encode_cursor(self._from),
            end_cursor=encode_cursor(self._to - 1),
            has_next_page=self._to < len(self._ids),
        )


def new_friends_connection(
    ids, first: int | None = None, after: str | None = None
) -> FriendsConnectionResolver:
    """Build a connection over ``ids`` starting after the ``after`` cursor and
    holding at most ``first`` items."""
    ids = tuple(ids)
    start = 0 if after is None else _decode_cursor(after)
    stop = len(ids)
    if first is not None:
        stop = min(start + first, len(ids))
    return FriendsConnectionResolver(ids, start, stop)


class Resolver:
    """Root resolver of the schema; reviews are kept per resolver."""

    def __init__(self) -> None:
        self._reviews: defaultdict[str, list[Review]] = defaultdict(list)

    def hero(self, episode: str = "NEWHOPE") -> CharacterResolver:
        if episode == "EMPIRE":
            return CharacterResolver(HumanResolver(_HUMAN_DATA[ID("1000")]))
        return CharacterResolver(DroidResolver(_DROID_DATA[ID("2001")]))

    def reviews(self, episode: str) -> list[ReviewResolver]:
        return [ReviewResolver(review) for review in self._reviews.get(episode, [])]

    def search(self, text: str) -> list[SearchResultResolver]:
        results = [SearchResultResolver(HumanResolver(h)) for h in HUMANS if text in h.name]
        results += [SearchResultResolver(DroidResolver(d)) for d in DROIDS if text in d.name]
        results += [
            SearchResultResolver(StarshipResolver(s)) for s in STARSHIPS if text in s.name
        ]
        return results

    def character(self, id: str) -> CharacterResolver | None:
        return resolve_character(id)

    def human(self, id: str) -> HumanResolver | None:
        found = _HUMAN_DATA.get(ID(id))
        return HumanResolver(found) if found is not None else None

    def droid(self, id: str) -> DroidResolver | None:
        found = _DROID_DATA.get(ID(id))
        return DroidResolver(found) if found is not None else None

    def starship(self, id: str) -> StarshipResolver | None:
        found = _STARSHIP_DATA.get(ID(id))
        return StarshipResolver(found) if found is not None else None

    def create_review(self, episode: str, review: ReviewInput) -> ReviewResolver:
        stored = Review(stars=review.stars, commentary=review.commentary)
        self._reviews[episode].append(stored)
        return ReviewResolver(stored)