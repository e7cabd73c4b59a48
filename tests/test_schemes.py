from osm2lanes.highway import Highway, HighwayError, HighwayType
from osm2lanes.schemes import Schemes
from osm2lanes.tag_values import Lit, Smoothness, TagError, TrackType
from osm2lanes.tags import Tags


def test_full_tags():
    tags = Tags.from_pairs(
        [
            ("name", "Main Street"),
            ("ref", "A1"),
            ("highway", "secondary"),
            ("lit", "no"),
            ("tracktype", "grade3"),
            ("smoothness", "good"),
        ]
    )
    schemes = Schemes.from_tags(tags)
    assert schemes.name == "Main Street"
    assert schemes.ref == "A1"
    assert schemes.highway == Highway.active(HighwayType.SECONDARY)
    assert schemes.lit is Lit.NO
    assert schemes.tracktype is TrackType.GRADE3
    assert schemes.smoothness is Smoothness.GOOD
    assert schemes.errors == {}


def test_empty_tags():
    schemes = Schemes.from_tags(Tags())
    assert (schemes.name, schemes.ref, schemes.highway, schemes.lit) == (None, None, None, None)
    assert schemes.errors == {}


def test_unknown_lit_recorded():
    tags = Tags.from_pairs([("highway", "path"), ("lit", "bright")])
    schemes = Schemes.from_tags(tags)
    assert schemes.lit is None
    assert schemes.highway == Highway.active(HighwayType.PATH)
    error = schemes.errors["lit"]
    assert isinstance(error, TagError)
    assert error.value == "bright"
    assert set(schemes.errors) == {"lit"}


def test_bad_highway_recorded():
    schemes = Schemes.from_tags(Tags.from_pair("highway", "nonsense"))
    assert schemes.highway is None
    assert isinstance(schemes.errors["highway"], HighwayError)
    assert schemes.errors["highway"].value == "nonsense"