"""The ``highway=*`` scheme and its lifecycle tags."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from osm2lanes import keys
from osm2lanes.tag_values import TagError, _OrderedEnum, parse_tag
from osm2lanes.tags import Tags

__all__ = [
    "Highway",
    "HighwayError",
    "HighwayImportance",
    "HighwayType",
    "Lifecycle",
    "NonTravel",
]


class HighwayImportance(_OrderedEnum):
    """Classified road importance, most important first."""

    MOTORWAY = "motorway"
    TRUNK = "trunk"
    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"


class NonTravel(Enum):
    """Highways that are not for ordinary travel."""

    ESCAPE = "escape"
    RACEWAY = "raceway"

    def __str__(self) -> str:
        return self.value


class HighwayType(Enum):
    """Every known value of ``highway=*``."""

    MOTORWAY = "motorway"
    TRUNK = "trunk"
    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"
    MOTORWAY_LINK = "motorway_link"
    TRUNK_LINK = "trunk_link"
    PRIMARY_LINK = "primary_link"
    SECONDARY_LINK = "secondary_link"
    TERTIARY_LINK = "tertiary_link"
    RACEWAY = "raceway"
    ESCAPE = "escape"
    RESIDENTIAL = "residential"
    SERVICE = "service"
    UNCLASSIFIED = "unclassified"
    UNKNOWN_ROAD = "road"
    TRACK = "track"
    LIVING_STREET = "living_street"
    BUS_GUIDEWAY = "bus_guideway"
    BRIDLEWAY = "bridleway"
    CORRIDOR = "corridor"
    CYCLEWAY = "cycleway"
    FOOTWAY = "footway"
    PATH = "path"
    PEDESTRIAN = "pedestrian"
    STEPS = "steps"

    def __str__(self) -> str:
        return self.value

    def importance(self) -> HighwayImportance | None:
        """The importance of a classified road or link, else None."""
        base = self.value.removesuffix("_link")
        try:
            return HighwayImportance(base)
        except ValueError:
            return None

    def is_classified(self) -> bool:
        """A classified road, not a link."""
        return self.importance() is not None and not self.is_link()

    def is_link(self) -> bool:
        """A link road of a classified road."""
        return self.value.endswith("_link")

    def non_travel(self) -> NonTravel | None:
        """The non-travel kind, if this is one."""
        try:
            return NonTravel(self.value)
        except ValueError:
            return None


class Lifecycle(Enum):
    """Whether a highway exists, is being built or is planned."""

    ACTIVE = "active"
    CONSTRUCTION = "construction"
    PROPOSED = "proposed"


class HighwayError(ValueError):
    """A highway lifecycle tag is missing or has an unknown value."""

    def __init__(self, key: str, value: str | None = None) -> None:
        self.key = key
        self.value = value
        if value is None:
            message = f"{key} missing"
        else:
            message = f"{key}={value}"
        super().__init__(message)


@dataclass(frozen=True)
class Highway:
    """A highway type together with its lifecycle."""

    highway_type: HighwayType
    lifecycle: Lifecycle = Lifecycle.ACTIVE

    @classmethod
    def from_tags(cls, tags: Tags) -> Highway | None:
        """Read the highway from tags; None if there is no ``highway`` tag."""
        try:
            highway_type = parse_tag(tags, keys.HIGHWAY, HighwayType)
        except TagError as err:
            return cls._from_lifecycle_tag(tags, err.value)
        if highway_type is None:
            return None
        return cls.active(highway_type)

    @classmethod
    def _from_lifecycle_tag(cls, tags: Tags, value: str) -> Highway:
        if value == "construction":
            key = keys.CONSTRUCTION
        elif value == "proposed":
            key = keys.PROPOSED
        else:
            raise HighwayError(keys.HIGHWAY, value)
        try:
            highway_type = parse_tag(tags, key, HighwayType)
        except TagError as err:
            raise HighwayError(keys.CONSTRUCTION, err.value) from None
        if highway_type is None:
            raise HighwayError(key)
        # Proposed highways are read with the construction lifecycle.
        return cls.construction(highway_type)

    @classmethod
    def active(cls, highway_type: HighwayType) -> Highway:
        return cls(highway_type, Lifecycle.ACTIVE)

    @classmethod
    def construction(cls, highway_type: HighwayType) -> Highway:
        return cls(highway_type, Lifecycle.CONSTRUCTION)

    @classmethod
    def proposed(cls, highway_type: HighwayType) -> Highway:
        return cls(highway_type, Lifecycle.PROPOSED)

    def is_construction(self) -> bool:
        return self.lifecycle is Lifecycle.CONSTRUCTION

    def is_proposed(self) -> bool:
        return self.lifecycle is Lifecycle.PROPOSED

    def __str__(self) -> str:
        return str(self.highway_type)

    def to_dict(self) -> dict[str, str]:
        """Serialisable form; the lifecycle is left out when active."""
        data = {"highway": str(self.highway_type)}
        if self.lifecycle is not Lifecycle.ACTIVE:
            data["lifecycle"] = self.lifecycle.value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Highway:
        """Inverse of to_dict; raises ValueError on unknown values."""
        highway_type = HighwayType(data["highway"])
        lifecycle = Lifecycle(data.get("lifecycle", Lifecycle.ACTIVE.value))
        return cls(highway_type, lifecycle)