from datetime import timedelta

import pytest

from gqlgo.cache import (
    Hint,
    HintCollector,
    Scope,
    add_hint,
    hintable,
    resolve_hints,
    ttl,
)


def test_hint_str_public():
    assert str(Hint(max_age=ttl(3600), scope=Scope.PUBLIC)) == "public, max-age=3600"


def test_hint_str_private():
    assert str(Hint(max_age=ttl(60), scope=Scope.PRIVATE)) == "private, max-age=60"


def test_hint_without_age_cannot_render():
    with pytest.raises(ValueError):
        str(Hint())


def test_ttl_is_seconds():
    assert ttl(90) == timedelta(seconds=90)


def test_resolve_empty_is_public_zero():
    hint = resolve_hints([])
    assert hint.scope is Scope.PUBLIC
    assert hint.max_age == timedelta(0)


def test_resolve_takes_minimum_and_private():
    short, long = ttl(30), ttl(600)
    hint = resolve_hints(
        [
            Hint(max_age=long, scope=Scope.PUBLIC),
            Hint(max_age=None, scope=Scope.PRIVATE),
            Hint(max_age=short, scope=Scope.PUBLIC),
        ]
    )
    assert hint.max_age == short
    assert hint.scope is Scope.PRIVATE


def test_hintable_collects_hints():
    with hintable() as hints:
        add_hint(Hint(max_age=ttl(120)))
        add_hint(Hint(max_age=ttl(45)))
    result = hints.resolve()
    assert result.max_age == ttl(45)
    assert result.scope is Scope.PUBLIC


def test_add_hint_outside_collection_is_ignored():
    add_hint(Hint(max_age=ttl(5), scope=Scope.PRIVATE))
    with hintable() as hints:
        pass
    assert hints.resolve() == resolve_hints([])


def test_collector_closed_after_block():
    with hintable() as hints:
        pass
    with pytest.raises(RuntimeError):
        hints.add(Hint(max_age=ttl(1)))


def test_collector_direct_use():
    collector = HintCollector()
    collector.add(Hint(max_age=ttl(10), scope=Scope.PRIVATE))
    assert collector.resolve() == Hint(max_age=ttl(10), scope=Scope.PRIVATE)