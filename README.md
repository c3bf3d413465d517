# gqlgo

Building blocks for GraphQL servers in plain Python. The package has no
third-party dependencies.

## What is inside

- `gqlgo.errors`: `QueryError`, an exception that carries a message, source
  `Location`s, a resolver `path`, a validation `rule`, a `resolver_error` and
  `extensions`. `to_dict()` returns the GraphQL error object and leaves out
  empty members. `errorf(format, *args)` builds a `QueryError` from a
  printf-style format string. When the last argument is an exception, it
  becomes the cause (`err` and `__cause__`). `Location.before(other)`
  orders positions by line and then by column.
- `gqlgo.ids`: `ID`, a `str` subclass for the `ID` scalar.
  `ID.from_graphql(value)` accepts a string or an integer and raises
  `TypeError` for anything else, booleans included. `to_json()` returns the
  quoted JSON string.
- `gqlgo.decode`: the `Unmarshaler` protocol for custom scalars.
  `implements_unmarshaler(obj)` accepts any object that has
  `implements_graphql_type` and also has either `unmarshal_graphql` or a
  `from_graphql` constructor.
- `gqlgo.scalar_map`: `Map`, a `dict` subclass for a `Map` scalar.
  `Map.from_graphql(value)` raises `TypeError` unless the value is a dict.
- `gqlgo.cache`: cache-control hints, described below.
- Example resolvers. Each module holds its schema text as `SCHEMA`.
  - `gqlgo.starwars`: humans, droids and starships, with reviews, search and
    cursor-based friends connections.
  - `gqlgo.social`: users who act as admins, people and search results.
  - `gqlgo.customerrors`: a droid lookup that raises `DroidNotFoundError`,
    which carries `extensions()`.
  - `gqlgo.caching`: resolvers that give cache hints.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Errors

```python
from gqlgo.errors import Location, QueryError, errorf

err = QueryError(message="boom", locations=[Location(line=3, column=20)])
str(err)       # 'graphql: boom (line 3, column 20)'
err.to_dict()  # {'message': 'boom', 'locations': [{'line': 3, 'column': 20}]}

cause = EOFError()
wrapped = errorf("read failed: %s", cause)
wrapped.__cause__ is cause  # True
```

## Cache hints

```python
from gqlgo.cache import Hint, Scope, add_hint, hintable, ttl

with hintable() as collector:
    add_hint(Hint(max_age=ttl(3600), scope=Scope.PUBLIC))
    add_hint(Hint(max_age=ttl(60), scope=Scope.PRIVATE))

str(collector.resolve())  # 'private, max-age=60'
```

The rules for combining hints:

- The resolved hint takes the smallest `max_age` among the hints.
- Its scope is private if any hint was private.
- If no hint gave a `max_age`, the result is `max-age=0`.

`resolve_hints(hints)` combines any iterable of hints in the same way.

Outside a `hintable()` block, `add_hint` does nothing. After the block
closes, calling `HintCollector.add` raises `RuntimeError`. Calling `str()` on
a `Hint` that has no `max_age` raises `ValueError`.

## Example resolvers

```python
from gqlgo.starwars import Resolver

root = Resolver()
root.hero("EMPIRE").name()                   # 'Luke Skywalker'
root.human("1000").height("FOOT")            # about 5.643
conn = root.hero("JEDI").friends_connection(first=1, after="Y3Vyc29yMQ==")
conn.page_info().has_next_page()             # True
```

In `gqlgo.starwars`:

- Reviews made with `create_review` are kept on the `Resolver` instance.
- `convert_length` raises `ValueError` for an unknown unit.
- Connection cursors are produced by `encode_cursor`.

In `gqlgo.social`, `Resolver.admin` and `Resolver.user` raise `LookupError`
when no matching user exists.

## What it does not do

This package does not parse schemas or queries, validate them, or execute
them. It has no introspection and no HTTP handler or server. The resolvers
are plain Python objects, and `SCHEMA` is plain text. To connect them you
need a GraphQL execution engine, which this package does not provide.