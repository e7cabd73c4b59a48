import pytest

from osm2lanes import keys
from osm2lanes.tag_values import (
    Access,
    Lit,
    Smoothness,
    TagError,
    TrackType,
    parse_default_tag,
    parse_tag,
)
from osm2lanes.tags import Tags


def test_parse_tag_present():
    tags = Tags.from_pair("lit", "yes")
    assert parse_tag(tags, "lit", Lit) is Lit.YES


def test_parse_tag_absent():
    assert parse_tag(Tags(), "lit", Lit) is None


def test_parse_tag_unknown_raises():
    tags = Tags.from_pair("lit", "sometimes")
    with pytest.raises(TagError) as info:
        parse_tag(tags, "lit", Lit)
    assert info.value.key == "lit"
    assert info.value.value == "sometimes"
    assert str(info.value) == "lit=sometimes"


@pytest.mark.parametrize(
    "kind, key",
    [(Lit, keys.LIT), (TrackType, keys.TRACK_TYPE), (Smoothness, keys.SMOOTHNESS)],
)
def test_default_tag_round_trip(kind, key):
    for member in kind:
        tags = Tags.from_pair(key, str(member))
        assert parse_default_tag(tags, kind) is member


def test_default_tag_unknown_value():
    tags = Tags.from_pair(keys.SMOOTHNESS, "smooth")
    with pytest.raises(TagError) as info:
        parse_default_tag(tags, Smoothness)
    assert info.value.key == keys.SMOOTHNESS


def test_default_tag_without_default_key():
    with pytest.raises(TypeError):
        parse_default_tag(Tags(), Access)


def test_kebab_and_digit_values():
    assert parse_default_tag(Tags.from_pair("lit", "sunset-sunrise"), Lit) is Lit.SUNSET_SUNRISE
    assert parse_default_tag(Tags.from_pair("tracktype", "grade1"), TrackType) is TrackType.GRADE1


def _parsed(key, kind, values):
    return [parse_default_tag(Tags.from_pair(key, value), kind) for value in values]


def test_ordering_follows_declaration():
    worst, good, bad, best = _parsed(
        keys.SMOOTHNESS, Smoothness, ["impassable", "good", "bad", "excellent"]
    )
    assert worst < best
    assert good >= bad

    grades = _parsed(keys.TRACK_TYPE, TrackType, ["grade5", "grade3", "grade1", "grade4", "grade2"])
    assert sorted(grades) == [
        TrackType.GRADE1,
        TrackType.GRADE2,
        TrackType.GRADE3,
        TrackType.GRADE4,
        TrackType.GRADE5,
    ]

    lits = _parsed(keys.LIT, Lit, ["yes", "automatic", "no"])
    assert max(lits) is Lit.AUTOMATIC


def test_access_parses_designated():
    tags = Tags.from_pair("access", "designated")
    assert parse_tag(tags, "access", Access) is Access.DESIGNATED