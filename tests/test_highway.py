import pytest

from osm2lanes.highway import (
    Highway,
    HighwayError,
    HighwayImportance,
    HighwayType,
    Lifecycle,
    NonTravel,
)
from osm2lanes.tags import Tags


@pytest.mark.parametrize("member", list(HighwayType))
def test_type_string_round_trip(member):
    assert HighwayType(str(member)) is member


def test_road_is_unknown_road():
    assert HighwayType("road") is HighwayType.UNKNOWN_ROAD


def test_unknown_type_raises():
    with pytest.raises(ValueError):
        HighwayType("construction")


def test_link_importance():
    link = HighwayType.MOTORWAY_LINK
    assert link.importance() is HighwayImportance.MOTORWAY
    assert link.is_link()
    assert not link.is_classified()
    assert HighwayType.TERTIARY.is_classified()
    assert HighwayType.RESIDENTIAL.importance() is None


def test_non_travel():
    assert HighwayType.RACEWAY.non_travel() is NonTravel.RACEWAY
    assert HighwayType.ESCAPE.non_travel() is NonTravel.ESCAPE
    assert HighwayType.PATH.non_travel() is None


def test_importance_ordering():
    importances = [
        HighwayType(value).importance()
        for value in ("tertiary", "motorway_link", "primary", "trunk_link", "secondary")
    ]
    assert sorted(importances) == [
        HighwayImportance.MOTORWAY,
        HighwayImportance.TRUNK,
        HighwayImportance.PRIMARY,
        HighwayImportance.SECONDARY,
        HighwayImportance.TERTIARY,
    ]
    assert HighwayType.MOTORWAY.importance() < HighwayType.TERTIARY_LINK.importance()


def test_from_tags_absent():
    assert Highway.from_tags(Tags()) is None


def test_from_tags_active():
    highway = Highway.from_tags(Tags.from_pair("highway", "primary"))
    assert highway == Highway.active(HighwayType.PRIMARY)
    assert not highway.is_construction()
    assert str(highway) == "primary"


def test_from_tags_construction():
    tags = Tags.from_pairs([("highway", "construction"), ("construction", "primary")])
    highway = Highway.from_tags(tags)
    assert highway.highway_type is HighwayType.PRIMARY
    assert highway.is_construction()


def test_construction_missing():
    with pytest.raises(HighwayError) as info:
        Highway.from_tags(Tags.from_pair("highway", "construction"))
    assert str(info.value) == "construction missing"


def test_construction_unknown():
    tags = Tags.from_pairs([("highway", "construction"), ("construction", "bogus")])
    with pytest.raises(HighwayError) as info:
        Highway.from_tags(tags)
    assert str(info.value) == "construction=bogus"


def test_proposed_read_as_construction():
    tags = Tags.from_pairs([("highway", "proposed"), ("proposed", "residential")])
    highway = Highway.from_tags(tags)
    assert highway.highway_type is HighwayType.RESIDENTIAL
    assert highway.is_construction()


def test_proposed_missing():
    with pytest.raises(HighwayError) as info:
        Highway.from_tags(Tags.from_pair("highway", "proposed"))
    assert str(info.value) == "proposed missing"


def test_unknown_highway():
    with pytest.raises(HighwayError) as info:
        Highway.from_tags(Tags.from_pair("highway", "bogus"))
    assert str(info.value) == "highway=bogus"
    assert info.value.value == "bogus"


def test_lifecycle_constructors():
    assert Highway.proposed(HighwayType.TRACK).is_proposed()
    assert Highway.construction(HighwayType.TRACK).lifecycle is Lifecycle.CONSTRUCTION
    assert Highway.active(HighwayType.TRACK).lifecycle is Lifecycle.ACTIVE


def test_to_dict_active_omits_lifecycle():
    assert Highway.active(HighwayType.PRIMARY).to_dict() == {"highway": "primary"}


@pytest.mark.parametrize("lifecycle", list(Lifecycle))
def test_dict_round_trip(lifecycle):
    highway = Highway(HighwayType.LIVING_STREET, lifecycle)
    assert Highway.from_dict(highway.to_dict()) == highway


def test_from_dict_unknown():
    with pytest.raises(ValueError):
        Highway.from_dict({"highway": "bogus"})