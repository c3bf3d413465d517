import pytest

from gqlgo.starwars import (
    ReviewInput,
    Resolver,
    convert_length,
    encode_cursor,
    new_friends_connection,
    resolve_character,
    resolve_characters,
)


@pytest.fixture
def resolver():
    return Resolver()


def names(characters):
    return [c.name() for c in characters]


def test_basic_hero(resolver):
    hero = resolver.hero()
    assert hero.id() == "2001"
    assert hero.name() == "R2-D2"
    assert names(hero.friends()) == ["Luke Skywalker", "Han Solo", "Leia Organa"]


def test_arguments_height(resolver):
    luke = resolver.human("1000")
    assert luke.name() == "Luke Skywalker"
    assert luke.height() == 1.72
    assert luke.height("FOOT") == pytest.approx(5.6430448)


def test_aliases_heroes_by_episode(resolver):
    assert resolver.hero("EMPIRE").name() == "Luke Skywalker"
    assert resolver.hero("JEDI").name() == "R2-D2"


def test_fragments_comparison(resolver):
    left = resolver.hero("EMPIRE")
    assert left.appears_in() == ["NEWHOPE", "EMPIRE", "JEDI"]
    assert names(left.friends()) == ["Han Solo", "Leia Organa", "C-3PO", "R2-D2"]
    assert left.to_human().height() == 1.72
    right = resolver.hero("JEDI")
    assert right.to_human() is None
    assert names(right.friends()) == ["Luke Skywalker", "Han Solo", "Leia Organa"]


def test_composed_fragments_ids(resolver):
    friends = resolver.hero("EMPIRE").friends()
    assert [f.id() for f in friends] == ["1002", "1003", "2000", "2001"]


def test_inline_fragments(resolver):
    jedi = resolver.hero("JEDI")
    assert jedi.to_droid().primary_function() == "Astromech"
    empire = resolver.hero("EMPIRE")
    assert empire.to_droid() is None
    assert empire.to_human().height() == 1.72


def test_search_single_droid(resolver):
    results = resolver.search("C-3PO")
    assert len(results) == 1
    assert results[0].to_droid().name() == "C-3PO"
    assert results[0].to_human() is None


def test_type_name_search(resolver):
    results = resolver.search("an")
    humans = [r.to_human().name() for r in results if r.to_human()]
    ships = [r.to_starship().name() for r in results if r.to_starship()]
    assert humans == ["Han Solo", "Leia Organa"]
    assert ships == ["TIE Advanced x1"]
    assert len(results) == 3


def test_connection_defaults(resolver):
    conn = resolver.hero().friends_connection()
    assert conn.total_count() == 3
    info = conn.page_info()
    assert info.start_cursor() == "Y3Vyc29yMQ=="
    assert info.end_cursor() == "Y3Vyc29yMw=="
    assert info.has_next_page() is False
    edges = conn.edges()
    assert [e.cursor() for e in edges] == ["Y3Vyc29yMQ==", "Y3Vyc29yMg==", "Y3Vyc29yMw=="]
    assert [e.node().name() for e in edges] == ["Luke Skywalker", "Han Solo", "Leia Organa"]


def test_connection_paged(resolver):
    conn = resolver.hero().friends_connection(first=1, after="Y3Vyc29yMQ==")
    assert conn.total_count() == 3
    info = conn.page_info()
    assert info.start_cursor() == "Y3Vyc29yMg=="
    assert info.end_cursor() == "Y3Vyc29yMg=="
    assert info.has_next_page() is True
    edges = conn.edges()
    assert [(e.cursor(), e.node().name()) for e in edges] == [("Y3Vyc29yMg==", "Han Solo")]

    more = resolver.hero().friends_connection(first=1, after="Y3Vyc29yMg==")
    info = more.page_info()
    assert info.start_cursor() == "Y3Vyc29yMw=="
    assert info.end_cursor() == "Y3Vyc29yMw=="
    assert info.has_next_page() is False
    assert names(more.friends()) == ["Leia Organa"]


def test_connection_rejects_bad_cursor():
    with pytest.raises(ValueError):
        new_friends_connection(["1000"], after="not base64!")


def test_connection_out_of_range_window_fails():
    conn = new_friends_connection(["1000"], after=encode_cursor(4))
    assert conn.total_count() == 1
    with pytest.raises(ValueError):
        conn.edges()


def test_mutation_reviews(resolver):
    assert resolver.reviews("JEDI") == []
    created = resolver.create_review(
        "JEDI", ReviewInput(stars=5, commentary="This is a great movie!")
    )
    assert created.stars() == 5
    assert created.commentary() == "This is a great movie!"
    other = resolver.create_review("EMPIRE", ReviewInput(stars=4))
    assert other.stars() == 4
    assert other.commentary() is None
    jedi = resolver.reviews("JEDI")
    assert [(r.stars(), r.commentary()) for r in jedi] == [(5, "This is a great movie!")]


def test_encode_cursor():
    assert encode_cursor(0) == "Y3Vyc29yMQ=="
    assert encode_cursor(2) == "Y3Vyc29yMw=="


def test_convert_length():
    assert convert_length(2.0, "METER") == 2.0
    assert convert_length(1.0, "FOOT") == pytest.approx(3.28084)
    with pytest.raises(ValueError, match="invalid unit"):
        convert_length(1.0, "YARD")


def test_mass_and_starships(resolver):
    assert resolver.human("1001").mass() == 136.0
    assert resolver.human("1004").mass() is None
    luke = resolver.human("1000")
    assert [s.name() for s in luke.starships()] == ["X-Wing", "Imperial shuttle"]
    assert resolver.human("1003").starships() == []


def test_lookups(resolver):
    assert resolver.human("9999") is None
    assert resolver.droid("2000").primary_function() == "Protocol"
    assert resolver.droid("1000") is None
    assert resolver.character("3000") is None
    assert resolver.character("1002").name() == "Han Solo"
    ship = resolver.starship("3001")
    assert ship.length() == 12.5
    assert ship.length("FOOT") == pytest.approx(12.5 * 3.28084)


def test_resolve_characters_skips_unknown():
    assert resolve_character("4242") is None
    assert names(resolve_characters(["2000", "4242", "1000"])) == ["C-3PO", "Luke Skywalker"]


def test_character_does_not_expose_other_fields(resolver):
    with pytest.raises(AttributeError):
        resolver.hero().primary_function