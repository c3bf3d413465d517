"""Query errors reported by schema parsing, validation and execution."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Location:
    """A line and column position inside a query document."""

    line: int
    column: int

    def before(self, other: Location) -> bool:
        """Return True if this location comes before ``other``."""
        return self.line < other.line or (
            self.line == other.line and self.column < other.column
        )


@dataclass
class QueryError(Exception):
    """An error in the shape GraphQL responses carry.

    ``err`` holds the underlying cause, if there is one; it is also set as
    the exception's ``__cause__`` so the usual chaining applies.
    """

    message: str
    locations: list[Location] = field(default_factory=list)
    path: list[Any] = field(default_factory=list)
    rule: str = ""
    resolver_error: BaseException | None = field(default=None, compare=False)
    extensions: dict[str, Any] | None = None
    err: BaseException | None = field(default=None, compare=False, repr=False)

    __hash__ = Exception.__hash__

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message)
        if self.err is not None:
            self.__cause__ = self.err

    def __str__(self) -> str:
        text = f"graphql: {self.message}"
        for loc in self.locations:
            text += f" (line {loc.line}, column {loc.column})"
        return text

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form of the error, leaving out empty members."""
        result: dict[str, Any] = {"message": self.message}
        if self.locations:
            result["locations"] = [
                {"line": loc.line, "column": loc.column} for loc in self.locations
            ]
        if self.path:
            result["path"] = list(self.path)
        if self.extensions:
            result["extensions"] = dict(self.extensions)
        return result


_VERB = re.compile(r"%([-+# 0]*)(\d+)?(?:\.(\d+))?([%vsdqftT])")


def _plain(arg: Any) -> str:
    if arg is None:
        return "<nil>"
    if isinstance(arg, bool):
        return "true" if arg else "false"
    return str(arg)


def _render(verb: str, precision: str | None, arg: Any) -> str:
    if verb in ("v", "s"):
        return _plain(arg)
    if verb == "d":
        return str(int(arg))
    if verb == "q":
        return json.dumps(str(arg), ensure_ascii=False)
    if verb == "f":
        digits = 6 if precision is None else int(precision)
        return f"{float(arg):.{digits}f}"
    if verb == "t":
        return "true" if arg else "false"
    return type(arg).__name__


def _format(fmt: str, args: tuple[Any, ...]) -> str:
    remaining = iter(args)
    missing = object()

    def replace(match: re.Match[str]) -> str:
        flags, width, precision, verb = match.groups()
        if verb == "%":
            return "%"
        arg = next(remaining, missing)
        if arg is missing:
            return f"%!{verb}(MISSING)"
        text = _render(verb, precision, arg)
        if width:
            size = int(width)
            if "-" in flags:
                text = text.ljust(size)
            elif "0" in flags and verb in "df":
                text = text.zfill(size)
            else:
                text = text.rjust(size)
        return text

    return _VERB.sub(replace, fmt)


def errorf(format: str, *args: Any) -> QueryError:
    """Build a QueryError from a printf-style format.

    Like its counterpart for plain errors, the last argument is kept as the
    underlying cause when it is an exception.
    """
    cause = args[-1] if args and isinstance(args[-1], BaseException) else None
    return QueryError(message=_format(format, args), err=cause)