"""Roads, their lanes and the markings between them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, ClassVar, Protocol, TypeVar

from osm2lanes.highway import Highway, HighwayType
from osm2lanes.metric import Metre, Speed, metre_sum
from osm2lanes.tag_values import Access, Lit, Smoothness, TrackType

__all__ = [
    "AccessAndDirection",
    "AccessByType",
    "Color",
    "Designated",
    "Direction",
    "Lane",
    "Marking",
    "Markings",
    "ParkingLane",
    "Road",
    "Semantic",
    "SeparatorLane",
    "ShoulderLane",
    "Style",
    "TravelLane",
    "lane_from_dict",
]

E = TypeVar("E", bound=Enum)


class _Locale(Protocol):
    def travel_width(
        self, designated: Designated, highway_type: HighwayType
    ) -> Metre: ...


class Direction(Enum):
    """Direction of travel relative to the way."""

    FORWARD = "forward"
    BACKWARD = "backward"
    BOTH = "both"

    def as_ascii(self) -> str:
        return _DIRECTION_ASCII[self]

    def as_utf8(self) -> str:
        return _DIRECTION_UTF8[self]


_DIRECTION_ASCII = {Direction.FORWARD: "^", Direction.BACKWARD: "v", Direction.BOTH: "|"}
_DIRECTION_UTF8 = {
    Direction.FORWARD: "\u2191",
    Direction.BACKWARD: "\u2193",
    Direction.BOTH: "\u2195",
}


class Designated(Enum):
    """Who a lane is designated for."""

    FOOT = "foot"
    BICYCLE = "bicycle"
    MOTOR = "motor_vehicle"
    BUS = "bus"


class Color(Enum):
    """Road paint colour."""

    WHITE = "white"
    YELLOW = "yellow"
    RED = "red"
    GREEN = "green"

    def as_ascii(self) -> str:
        return self.value[0]

    def as_utf8(self) -> str:
        return self.as_ascii()


class Style(Enum):
    """Road paint style."""

    SOLID_LINE = "solid_line"
    BROKEN_LINE = "broken_line"
    DASHED_LINE = "dashed_line"
    DOTTED_LINE = "dotted_line"
    NO_FILL = "no_fill"
    # up and down are left to right
    KERB_UP = "kerb_up"
    KERB_DOWN = "kerb_down"

    def as_utf8(self) -> str:
        return _STYLE_UTF8[self]

    def opposite(self) -> Style:
        """The style seen from the other side of the road."""
        if self is Style.KERB_UP:
            return Style.KERB_DOWN
        if self is Style.KERB_DOWN:
            return Style.KERB_UP
        return self


_STYLE_UTF8 = {
    Style.SOLID_LINE: "|",
    Style.BROKEN_LINE: "\u00a6",
    Style.DASHED_LINE: ":",
    Style.DOTTED_LINE: "\u16eb",
    Style.KERB_DOWN: "\\",
    Style.KERB_UP: "/",
    Style.NO_FILL: " ",
}


class Semantic(Enum):
    """What a separator means."""

    BUFFER = "buffer"
    CENTRE = "centre"
    HARD = "hard"
    KERB = "kerb"
    LANE = "lane"
    MODAL = "modal"
    SHOULDER = "shoulder"
    VERGE = "verge"


def _optional(kind: type[E], value: Any) -> E | None:
    return None if value is None else kind(value)


def _metre_to_json(metre: Metre) -> float:
    return float(metre.value)


def _metre_from_json(value: Any) -> Metre | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"width must be a number, not {value!r}")
    return Metre(float(value))


@dataclass
class Marking:
    """A single painted or physical marking."""

    style: Style
    width: Metre | None = None
    color: Color | None = None

    DEFAULT_WIDTH: ClassVar[Metre] = Metre(0.2)
    DEFAULT_SPACE: ClassVar[Metre] = Metre(0.1)

    def invert(self) -> None:
        """Turn the marking around in place."""
        self.style = self.style.opposite()

    def to_dict(self) -> dict[str, Any]:
        return {
            "style": self.style.value,
            "width": None if self.width is None else _metre_to_json(self.width),
            "color": None if self.color is None else self.color.value,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Marking:
        try:
            style = Style(data["style"])
        except KeyError:
            raise ValueError("marking is missing style") from None
        return cls(
            style=style,
            width=_metre_from_json(data.get("width")),
            color=_optional(Color, data.get("color")),
        )


class Markings(list):
    """Markings of a separator, left to right."""

    def flip(self) -> None:
        """Swap left and right: reverse the order and invert each marking."""
        self.reverse()
        for marking in self:
            marking.invert()

    def width(self, locale: _Locale) -> Metre:
        """Total width, using the default width where none is given."""
        return metre_sum(
            marking.width if marking.width is not None else Marking.DEFAULT_WIDTH
            for marking in self
        )

    def __repr__(self) -> str:
        return f"Markings({list.__repr__(self)})"


@dataclass
class AccessAndDirection:
    """Access for one kind of user."""

    access: Access
    direction: Direction | None = None

    def _to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"access": self.access.value}
        if self.direction is not None:
            data["direction"] = self.direction.value
        return data

    @classmethod
    def _from_dict(cls, data: Mapping[str, Any]) -> AccessAndDirection:
        try:
            access = Access(data["access"])
        except KeyError:
            raise ValueError("access entry is missing access") from None
        return cls(access, _optional(Direction, data.get("direction")))


_ACCESS_USERS = ("foot", "bicycle", "taxi", "bus", "motor")


@dataclass
class AccessByType:
    """Access by vehicle type."""

    foot: AccessAndDirection | None = None
    bicycle: AccessAndDirection | None = None
    taxi: AccessAndDirection | None = None
    bus: AccessAndDirection | None = None
    motor: AccessAndDirection | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialisable form; unset users are left out."""
        return {
            user: entry._to_dict()
            for user in _ACCESS_USERS
            if (entry := getattr(self, user)) is not None
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> AccessByType:
        return cls(
            **{
                user: AccessAndDirection._from_dict(data[user])
                for user in _ACCESS_USERS
                if data.get(user) is not None
            }
        )


class Lane(ABC):
    """A single lane of a road."""

    # European Agreement on Main International Traffic Arteries, III.1.1.1
    DEFAULT_WIDTH: ClassVar[Metre] = Metre(3.5)

    @abstractmethod
    def width(self, locale: _Locale, highway_type: HighwayType) -> Metre:
        """Width in metres."""

    @abstractmethod
    def as_ascii(self) -> str:
        """One ASCII character for the lane."""

    @abstractmethod
    def as_utf8(self) -> str:
        """One UTF-8 character for the lane."""

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Serialisable form, tagged by ``type``."""

    def mirror(self) -> Lane:
        """The lane seen from the other side of the road."""
        return self

    def is_separator(self) -> bool:
        return False

    def is_foot(self) -> bool:
        return False


_TRAVEL_ASCII = {
    Designated.FOOT: "s",
    Designated.BICYCLE: "b",
    Designated.MOTOR: "d",
    Designated.BUS: "B",
}
_TRAVEL_UTF8 = {
    Designated.FOOT: "\U0001f6b6",
    Designated.BICYCLE: "\U0001f6b2",
    Designated.MOTOR: "\U0001f697",
    Designated.BUS: "\U0001f68c",
}


@dataclass
class TravelLane(Lane):
    """A lane for travel."""

    designated: Designated
    direction: Direction | None = None
    width_: Metre | None = field(default=None, metadata={"name": "width"})
    max_speed: Speed | None = None
    access: AccessByType | None = None

    def width(self, locale: _Locale, highway_type: HighwayType) -> Metre:
        if self.width_ is not None:
            return self.width_
        return locale.travel_width(self.designated, highway_type)

    def as_ascii(self) -> str:
        return _TRAVEL_ASCII[self.designated]

    def as_utf8(self) -> str:
        return _TRAVEL_UTF8[self.designated]

    def is_foot(self) -> bool:
        return self.designated is Designated.FOOT

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": "travel"}
        if self.direction is not None:
            data["direction"] = self.direction.value
        data["designated"] = self.designated.value
        if self.width_ is not None:
            data["width"] = _metre_to_json(self.width_)
        if self.max_speed is not None:
            data["max_speed"] = self.max_speed.to_json_value()
        if self.access is not None:
            data["access"] = self.access.to_dict()
        return data


@dataclass
class ParkingLane(Lane):
    """A lane for parking."""

    direction: Direction
    designated: Designated
    width_: Metre | None = None

    def width(self, locale: _Locale, highway_type: HighwayType) -> Metre:
        if self.width_ is not None:
            return self.width_
        return locale.travel_width(self.designated, highway_type)

    def as_ascii(self) -> str:
        return "p"

    def as_utf8(self) -> str:
        return "\U0001f17f"

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "type": "parking",
            "direction": self.direction.value,
            "designated": self.designated.value,
        }
        if self.width_ is not None:
            data["width"] = _metre_to_json(self.width_)
        return data


@dataclass
class ShoulderLane(Lane):
    """A shoulder at the edge of the road."""

    width_: Metre | None = None

    def width(self, locale: _Locale, highway_type: HighwayType) -> Metre:
        return self.width_ if self.width_ is not None else Lane.DEFAULT_WIDTH

    def as_ascii(self) -> str:
        return "S"

    def as_utf8(self) -> str:
        return "\U0001f6c6"

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": "shoulder"}
        if self.width_ is not None:
            data["width"] = _metre_to_json(self.width_)
        return data


@dataclass
class SeparatorLane(Lane):
    """A separator between lanes."""

    semantic: Semantic | None = None
    markings: Markings | None = None

    def width(self, locale: _Locale, highway_type: HighwayType) -> Metre:
        if self.markings is None:
            return Metre()
        return self.markings.width(locale)

    def as_ascii(self) -> str:
        return "|"

    def as_utf8(self) -> str:
        return "|"

    def is_separator(self) -> bool:
        return True

    def mirror(self) -> SeparatorLane:
        markings = None
        if self.markings is not None:
            markings = Markings(replace(marking) for marking in self.markings)
            markings.flip()
        return SeparatorLane(semantic=self.semantic, markings=markings)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"type": "separator"}
        if self.semantic is not None:
            data["semantic"] = self.semantic.value
        if self.markings is not None:
            data["markings"] = [marking.to_dict() for marking in self.markings]
        return data


def _markings_from_json(value: Any) -> Markings | None:
    if value is None:
        return None
    if not isinstance(value, list):
        raise ValueError("markings must be a list")
    return Markings(Marking.from_dict(item) for item in value)


def lane_from_dict(data: Mapping[str, Any]) -> Lane:
    """Read a lane written by ``Lane.to_dict``."""
    kind = data.get("type")
    try:
        if kind == "travel":
            max_speed = data.get("max_speed")
            access = data.get("access")
            return TravelLane(
                designated=Designated(data["designated"]),
                direction=_optional(Direction, data.get("direction")),
                width_=_metre_from_json(data.get("width")),
                max_speed=None if max_speed is None else Speed.from_json_value(max_speed),
                access=None if access is None else AccessByType.from_dict(access),
            )
        if kind == "parking":
            return ParkingLane(
                direction=Direction(data["direction"]),
                designated=Designated(data["designated"]),
                width_=_metre_from_json(data.get("width")),
            )
        if kind == "shoulder":
            return ShoulderLane(width_=_metre_from_json(data.get("width")))
        if kind == "separator":
            return SeparatorLane(
                semantic=_optional(Semantic, data.get("semantic")),
                markings=_markings_from_json(data.get("markings")),
            )
    except KeyError as err:
        raise ValueError(f"{kind} lane is missing field {err}") from None
    raise ValueError(f"unknown lane type {kind!r}")


def _scheme_to_json(value: Enum) -> str:
    return value.name.lower()


def _scheme_from_json(kind: type[E], value: Any) -> E | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"invalid {kind.__name__} {value!r}")
    try:
        return kind[value.upper()]
    except KeyError:
        raise ValueError(f"invalid {kind.__name__} {value!r}") from None


@dataclass(kw_only=True)
class Road:
    """A road: its highway, attributes and lanes from left to right."""

    name: str | None = None
    ref: str | None = None
    highway: Highway
    lit: Lit | None = None
    tracktype: TrackType | None = None
    smoothness: Smoothness | None = None
    lanes: list[Lane]

    def has_separators(self) -> bool:
        return any(lane.is_separator() for lane in self.lanes)

    def width(self, locale: _Locale) -> Metre:
        """Total width of all lanes in metres."""
        return metre_sum(
            lane.width(locale, self.highway.highway_type) for lane in self.lanes
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.name is not None:
            data["name"] = self.name
        if self.ref is not None:
            data["ref"] = self.ref
        data.update(self.highway.to_dict())
        for key, scheme in (
            ("lit", self.lit),
            ("tracktype", self.tracktype),
            ("smoothness", self.smoothness),
        ):
            if scheme is not None:
                data[key] = _scheme_to_json(scheme)
        data["lanes"] = [lane.to_dict() for lane in self.lanes]
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Road:
        try:
            highway = Highway.from_dict(dict(data))
            lanes: Iterable[Any] = data["lanes"]
        except KeyError as err:
            raise ValueError(f"road is missing field {err}") from None
        return cls(
            name=data.get("name"),
            ref=data.get("ref"),
            highway=highway,
            lit=_scheme_from_json(Lit, data.get("lit")),
            tracktype=_scheme_from_json(TrackType, data.get("tracktype")),
            smoothness=_scheme_from_json(Smoothness, data.get("smoothness")),
            lanes=[lane_from_dict(lane) for lane in lanes],
        )