"""Fetching ways and their surroundings from the Overpass API."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

import requests

from osm2lanes.locale import DrivingSide, Locale
from osm2lanes.tags import Tags

__all__ = [
    "Element",
    "ElementType",
    "EmptyResponseError",
    "LatLon",
    "MalformedResponseError",
    "OVERPASS_URL",
    "OverpassError",
    "distance_to_line",
    "get_nearby",
    "get_tags",
    "get_way",
    "nearest_way",
    "parse_response",
    "response_locale",
]

log = logging.getLogger(__name__)

OVERPASS_URL = "https://overpass-api.de/api/interpreter"
_TIMEOUT = 30.0

_ENCLOSING = (
    ">;\n"
    "is_in->.enclosing;\n"
    "(\n"
    '  area.enclosing["ISO3166-2"];\n'
    '  area.enclosing["ISO3166-1"];\n'
    '  area.enclosing["driving_side"];\n'
    ");\n"
    "out tags;"
)

Point = tuple[float, float]


class OverpassError(Exception):
    """A request to Overpass failed."""


class EmptyResponseError(OverpassError):
    def __init__(self) -> None:
        super().__init__("overpass response empty")


class MalformedResponseError(OverpassError):
    def __init__(self) -> None:
        super().__init__("overpass response malformed")


@dataclass(frozen=True)
class LatLon:
    lat: float
    lon: float


class ElementType(Enum):
    NODE = "node"
    WAY = "way"
    AREA = "area"


@dataclass
class Element:
    """One element of an Overpass response."""

    type: ElementType
    id: int
    tags: Tags
    geometry: list[LatLon] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Element:
        """Read an element; MalformedResponseError if fields are wrong."""
        try:
            element_type = ElementType(data["type"])
            element_id = data["id"]
            if isinstance(element_id, bool) or not isinstance(element_id, int):
                raise ValueError("id")
            tags = Tags.from_dict(data["tags"])
            raw_geometry = data.get("geometry")
            geometry = None
            if raw_geometry is not None:
                geometry = [
                    LatLon(float(point["lat"]), float(point["lon"]))
                    for point in raw_geometry
                ]
        except (KeyError, TypeError, ValueError, AttributeError):
            raise MalformedResponseError() from None
        return cls(element_type, element_id, tags, geometry)

    def line(self) -> list[Point] | None:
        """Geometry as ``(lat, lon)`` points."""
        if self.geometry is None:
            return None
        return [(point.lat, point.lon) for point in self.geometry]


def parse_response(data: Any) -> list[Element]:
    """Elements of a decoded Overpass JSON response."""
    if not isinstance(data, Mapping) or not isinstance(data.get("elements"), list):
        raise MalformedResponseError()
    return [Element.from_dict(item) for item in data["elements"]]


def _first_tag(elements: Iterable[Element], key: str) -> str | None:
    return next(
        (value for element in elements if (value := element.tags.get(key)) is not None),
        None,
    )


def response_locale(elements: Sequence[Element]) -> Locale:
    """Locale from the enclosing areas found in a response."""
    side_text = _first_tag(elements, "driving_side")
    try:
        side = DrivingSide.RIGHT if side_text is None else DrivingSide(side_text)
    except ValueError:
        raise MalformedResponseError() from None
    code = _first_tag(elements, "ISO3166-2") or _first_tag(elements, "ISO3166-1")
    return Locale.builder().driving_side(side).iso_3166_option(code).build()


def _segment_distance(point: Point, start: Point, end: Point) -> float:
    px, py = point
    ax, ay = start
    bx, by = end
    dx, dy = bx - ax, by - ay
    length_sq = dx * dx + dy * dy
    if length_sq == 0:
        return math.hypot(px - ax, py - ay)
    t = max(0.0, min(1.0, ((px - ax) * dx + (py - ay) * dy) / length_sq))
    return math.hypot(px - (ax + t * dx), py - (ay + t * dy))


def distance_to_line(point: Point, line: Sequence[Point]) -> float:
    """Euclidean distance from a point to a line string; inf if empty."""
    if not line:
        return math.inf
    if len(line) == 1:
        return math.hypot(point[0] - line[0][0], point[1] - line[0][1])
    return min(
        _segment_distance(point, start, end) for start, end in zip(line, line[1:])
    )


def nearest_way(
    elements: Iterable[Element], point: Point
) -> tuple[Element, list[Point]]:
    """The element with geometry nearest to ``point`` and its line."""
    candidates = [
        (element, line) for element in elements if (line := element.line()) is not None
    ]
    if not candidates:
        raise EmptyResponseError()
    element, line = min(candidates, key=lambda pair: distance_to_line(point, pair[1]))
    if element.type is not ElementType.WAY:
        raise MalformedResponseError()
    return element, line


def _fetch(query: str) -> list[Element]:
    try:
        response = requests.get(OVERPASS_URL, params={"data": query}, timeout=_TIMEOUT)
        response.raise_for_status()
        data = response.json()
    except (requests.RequestException, ValueError) as err:
        raise OverpassError(str(err)) from err
    log.debug("overpass response: %r", data)
    return parse_response(data)


def get_tags(way_id: int) -> Tags:
    """Tags of a way."""
    elements = _fetch(f"[out:json][timeout:2];way(id:{way_id});out tags;")
    if not elements:
        raise EmptyResponseError()
    way = elements.pop()
    if elements or way.type is not ElementType.WAY or way.id != way_id:
        raise MalformedResponseError()
    return way.tags


def get_way(way_id: int) -> tuple[Tags, list[Point], Locale]:
    """Tags, geometry and locale of a way."""
    elements = _fetch(
        f"[out:json][timeout:25];\nway(id:{way_id});\nout tags geom;\n{_ENCLOSING}"
    )
    locale = response_locale(elements)
    if not elements:
        raise EmptyResponseError()
    way = elements[0]
    if way.type is not ElementType.WAY or way.id != way_id:
        raise MalformedResponseError()
    line = way.line()
    if line is None:
        raise MalformedResponseError()
    return way.tags, line, locale


def get_nearby(
    point: Point, radius: float
) -> tuple[int, Tags, list[Point], Locale]:
    """The highway nearest to ``(lat, lon)`` within ``radius`` metres."""
    lat, lon = point
    elements = _fetch(
        "[out:json][timeout:25];\n"
        f'way(around:{radius},{lat},{lon})["highway"];\n'
        f"out tags geom;\n{_ENCLOSING}"
    )
    locale = response_locale(elements)
    way, line = nearest_way(elements, point)
    return way.id, way.tags, line, locale