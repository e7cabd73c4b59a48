"""Lane dependent access from ``|`` separated ``*:lanes`` tags."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from osm2lanes import keys
from osm2lanes.tags import TagKey, Tags

__all__ = [
    "ConflictingLaneAccessError",
    "LaneAccess",
    "LaneDependentAccess",
    "LaneDependentAccessError",
    "UnknownLaneAccessError",
]


class LaneAccess(Enum):
    """Access value of a single lane; an empty entry is NONE."""

    NONE = ""
    NO = "no"
    YES = "yes"
    DESIGNATED = "designated"

    def __str__(self) -> str:
        return self.value


class LaneDependentAccessError(ValueError):
    """Lane dependent access tags could not be read."""


class UnknownLaneAccessError(LaneDependentAccessError):
    """A lane entry has an unknown value."""

    def __init__(self, key: str, value: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"unknown tag value {key}={value}")


class ConflictingLaneAccessError(LaneDependentAccessError):
    """The total and directional lane tags disagree."""

    def __init__(self) -> None:
        super().__init__("conflicting tags")


def _read(tags: Tags, key: str) -> tuple[LaneAccess, ...] | None:
    raw = tags.get(key)
    if raw is None:
        return None
    try:
        return tuple(LaneAccess(part) for part in raw.split("|"))
    except ValueError:
        raise UnknownLaneAccessError(keys.TRACK_TYPE, raw) from None


@dataclass(frozen=True)
class LaneDependentAccess:
    """Per-lane access.

    Exactly one form is set: ``left_to_right`` for all lanes, ``forward``
    or ``backward`` alone, or ``forward`` and ``backward`` together.
    """

    left_to_right: tuple[LaneAccess, ...] | None = None
    forward: tuple[LaneAccess, ...] | None = None
    backward: tuple[LaneAccess, ...] | None = None

    @classmethod
    def from_tags(cls, tags: Tags, key: str) -> LaneDependentAccess | None:
        """Read ``key``, ``key:forward`` and ``key:backward``.

        Returns None when none is tagged; raises ConflictingLaneAccessError
        when they disagree.
        """
        key = TagKey(key)
        total = _read(tags, key)
        forward = _read(tags, key + "forward")
        backward = _read(tags, key + "backward")

        if total is None and forward is not None and backward is None:
            return cls(forward=forward)
        if total is None and forward is None and backward is not None:
            return cls(backward=backward)
        if forward is not None and backward is not None:
            if total is not None:
                if len(forward) + len(backward) != len(total):
                    raise ConflictingLaneAccessError()
                if (*forward, *reversed(backward)) != total:
                    raise ConflictingLaneAccessError()
            return cls(forward=forward, backward=backward)
        if total is not None:
            if forward is not None and any(
                left != right for left, right in zip(total, forward)
            ):
                raise ConflictingLaneAccessError()
            if backward is not None and any(
                left != right
                for left, right in zip(reversed(total), reversed(backward))
            ):
                raise ConflictingLaneAccessError()
            return cls(left_to_right=total)
        return None