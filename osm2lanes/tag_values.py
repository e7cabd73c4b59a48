"""Enumerated tag values and reading them from tags."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import TypeVar

from osm2lanes import keys
from osm2lanes.tags import TagKey, Tags

__all__ = [
    "Access",
    "Lit",
    "Smoothness",
    "TagError",
    "TrackType",
    "parse_default_tag",
    "parse_tag",
]

T = TypeVar("T")


class TagError(ValueError):
    """A tag has a value that is not understood."""

    def __init__(self, key: str, value: str) -> None:
        self.key = TagKey(key)
        self.value = value
        super().__init__(f"{self.key}={value}")


class _OrderedEnum(Enum):
    """Enum whose members compare by declaration order."""

    def _rank(self) -> int:
        return list(type(self)).index(self)

    def _check(self, other: object) -> bool:
        return type(other) is type(self)

    def __lt__(self, other: object) -> bool:
        if not self._check(other):
            return NotImplemented
        return self._rank() < other._rank()  # type: ignore[attr-defined]

    def __le__(self, other: object) -> bool:
        if not self._check(other):
            return NotImplemented
        return self._rank() <= other._rank()  # type: ignore[attr-defined]

    def __gt__(self, other: object) -> bool:
        if not self._check(other):
            return NotImplemented
        return self._rank() > other._rank()  # type: ignore[attr-defined]

    def __ge__(self, other: object) -> bool:
        if not self._check(other):
            return NotImplemented
        return self._rank() >= other._rank()  # type: ignore[attr-defined]

    def __str__(self) -> str:
        return str(self.value)


class Access(Enum):
    """Values of the ``access=*`` family of keys."""

    YES = "yes"
    NO = "no"
    PRIVATE = "private"
    PERMISSIVE = "permissive"
    PERMIT = "permit"
    DESTINATION = "destination"
    DELIVERY = "delivery"
    CUSTOMERS = "customers"
    DESIGNATED = "designated"

    def __str__(self) -> str:
        return self.value


class Lit(_OrderedEnum):
    """Values of ``lit=*``."""

    YES = "yes"
    NO = "no"
    SUNSET_SUNRISE = "sunset-sunrise"
    AUTOMATIC = "automatic"


class TrackType(_OrderedEnum):
    """Values of ``tracktype=*``."""

    GRADE1 = "grade1"
    GRADE2 = "grade2"
    GRADE3 = "grade3"
    GRADE4 = "grade4"
    GRADE5 = "grade5"


class Smoothness(_OrderedEnum):
    """Values of ``smoothness=*``, from worst to best."""

    IMPASSABLE = "impassable"
    VERY_HORRIBLE = "very_horrible"
    HORRIBLE = "horrible"
    VERY_BAD = "very_bad"
    BAD = "bad"
    INTERMEDIATE = "intermediate"
    GOOD = "good"
    EXCELLENT = "excellent"


_DEFAULT_KEYS: dict[type, TagKey] = {
    Lit: keys.LIT,
    TrackType: keys.TRACK_TYPE,
    Smoothness: keys.SMOOTHNESS,
}


def parse_tag(tags: Tags, key: str, kind: Callable[[str], T]) -> T | None:
    """Read ``key`` from ``tags`` as ``kind``.

    Returns None when the key is absent and raises TagError when the
    value cannot be read as ``kind``.
    """
    raw = tags.get(key)
    if raw is None:
        return None
    try:
        return kind(raw)
    except ValueError:
        raise TagError(key, raw) from None


def parse_default_tag(tags: Tags, kind: type[T]) -> T | None:
    """Read ``kind`` from its usual key, e.g. Lit from ``lit``."""
    try:
        key = _DEFAULT_KEYS[kind]
    except KeyError:
        raise TypeError(f"{kind!r} has no default tag key") from None
    return parse_tag(tags, key, kind)