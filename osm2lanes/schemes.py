"""All tag schemes read from one set of tags."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TypeVar

from osm2lanes import keys
from osm2lanes.highway import Highway, HighwayError
from osm2lanes.tag_values import Lit, Smoothness, TagError, TrackType, parse_default_tag
from osm2lanes.tags import Tags

__all__ = ["Schemes"]

T = TypeVar("T")


@dataclass
class Schemes:
    """Known schemes of a way.

    A scheme whose tags could not be read is None, and the error is kept
    in ``errors`` under the field's name.
    """

    name: str | None = None
    ref: str | None = None
    highway: Highway | None = None
    lit: Lit | None = None
    tracktype: TrackType | None = None
    smoothness: Smoothness | None = None
    errors: dict[str, ValueError] = field(default_factory=dict)

    @classmethod
    def from_tags(cls, tags: Tags) -> Schemes:
        errors: dict[str, ValueError] = {}

        def attempt(name: str, read: Callable[[], T | None]) -> T | None:
            try:
                return read()
            except (TagError, HighwayError) as err:
                errors[name] = err
                return None

        return cls(
            name=tags.get(keys.NAME),
            ref=tags.get(keys.REF),
            highway=attempt("highway", lambda: Highway.from_tags(tags)),
            lit=attempt("lit", lambda: parse_default_tag(tags, Lit)),
            tracktype=attempt("tracktype", lambda: parse_default_tag(tags, TrackType)),
            smoothness=attempt("smoothness", lambda: parse_default_tag(tags, Smoothness)),
            errors=errors,
        )