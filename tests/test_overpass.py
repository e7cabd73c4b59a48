import math

import pytest
import responses

from osm2lanes.locale import DrivingSide
from osm2lanes.overpass import (
    OVERPASS_URL,
    Element,
    ElementType,
    EmptyResponseError,
    LatLon,
    MalformedResponseError,
    OverpassError,
    distance_to_line,
    get_nearby,
    get_tags,
    get_way,
    nearest_way,
    parse_response,
    response_locale,
)

WAY_ID = 1001
WAY_POINTS = [(-27.0, 153.0), (-27.001, 153.002), (-27.003, 153.004), (-27.1, 153.1)]


def _way():
    return {
        "type": "way",
        "id": WAY_ID,
        "geometry": [{"lat": lat, "lon": lon} for lat, lon in WAY_POINTS],
        "tags": {
            "highway": "trunk",
            "maxspeed": "100",
            "name": "Example Highway",
            "ref": "7",
            "surface": "asphalt",
        },
    }


def _area(area_id, tags):
    return {"type": "area", "id": area_id, "tags": tags}


RESPONSE = {
    "version": 0.6,
    "elements": [
        _way(),
        _area(
            2001,
            {"ISO3166-1": "AU", "admin_level": "2", "driving_side": "left", "name": "Country"},
        ),
        _area(2002, {"ISO3166-2": "AU-QLD", "admin_level": "4", "name": "State"}),
    ],
}


def test_element_from_response():
    elements = parse_response(RESPONSE)
    assert len(elements) == 3
    assert elements[0].geometry is not None
    assert elements[0].type is ElementType.WAY
    assert elements[1].geometry is None


def test_malformed_response():
    with pytest.raises(MalformedResponseError):
        parse_response({"no": "elements"})
    with pytest.raises(MalformedResponseError):
        Element.from_dict({"type": "relation", "id": 1, "tags": {}})


def test_response_locale():
    locale = response_locale(parse_response(RESPONSE))
    assert locale.driving_side is DrivingSide.LEFT
    assert locale.country.alpha2 == "AU"
    assert locale.iso_3166_2_subdivision == "QLD"


def test_response_locale_defaults():
    locale = response_locale([])
    assert locale.driving_side is DrivingSide.RIGHT
    assert locale.country is None


def test_distance_to_line():
    line = [(0.0, 0.0), (10.0, 0.0)]
    assert distance_to_line((5.0, 3.0), line) == pytest.approx(3.0)
    assert distance_to_line((13.0, 4.0), line) == pytest.approx(5.0)
    assert distance_to_line((1.0, 1.0), []) == math.inf


def test_nearest_way():
    far = Element(ElementType.WAY, 1, parse_response(RESPONSE)[0].tags, [LatLon(50.0, 50.0)])
    near = Element(ElementType.WAY, 2, far.tags, [LatLon(0.0, 0.0), LatLon(1.0, 0.0)])
    element, line = nearest_way([far, near], (0.5, 0.1))
    assert element.id == 2
    assert line == [(0.0, 0.0), (1.0, 0.0)]
    with pytest.raises(EmptyResponseError):
        nearest_way(parse_response(RESPONSE)[1:], (0.0, 0.0))


def test_get_way():
    with responses.RequestsMock() as mock:
        mock.add(responses.GET, OVERPASS_URL, json=RESPONSE)
        tags, line, locale = get_way(WAY_ID)
    assert tags.get("highway") == "trunk"
    assert len(line) == 4
    assert line[0] == WAY_POINTS[0]
    assert locale.driving_side is DrivingSide.LEFT


def test_get_way_wrong_id():
    with responses.RequestsMock() as mock:
        mock.add(responses.GET, OVERPASS_URL, json=RESPONSE)
        with pytest.raises(MalformedResponseError):
            get_way(1)


def test_get_tags():
    single = {"elements": [_way()]}
    with responses.RequestsMock() as mock:
        mock.add(responses.GET, OVERPASS_URL, json=single)
        tags = get_tags(WAY_ID)
    assert tags.get("ref") == "7"


def test_get_tags_empty_and_extra():
    with responses.RequestsMock() as mock:
        mock.add(responses.GET, OVERPASS_URL, json={"elements": []})
        with pytest.raises(EmptyResponseError):
            get_tags(WAY_ID)
    with responses.RequestsMock() as mock:
        mock.add(responses.GET, OVERPASS_URL, json=RESPONSE)
        with pytest.raises(MalformedResponseError):
            get_tags(WAY_ID)


def test_get_nearby():
    with responses.RequestsMock() as mock:
        mock.add(responses.GET, OVERPASS_URL, json=RESPONSE)
        way_id, tags, line, locale = get_nearby(WAY_POINTS[0], 100.0)
    assert way_id == WAY_ID
    assert tags.get("name") == "Example Highway"
    assert len(line) == 4
    assert locale.country.alpha3 == "AUS"


def test_http_error():
    with responses.RequestsMock() as mock:
        mock.add(responses.GET, OVERPASS_URL, status=500)
        with pytest.raises(OverpassError):
            get_way(WAY_ID)