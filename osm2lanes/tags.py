"""OpenStreetMap tags: keys, a sorted tag map and its text and JSON forms."""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator, Mapping

__all__ = [
    "DuplicateKeyError",
    "MissingEqualsError",
    "ParseTagsError",
    "TagKey",
    "Tags",
]


class TagKey(str):
    """The key of an OSM tag.

    Adding a string or another key joins the parts with a colon:
    ``TagKey("lanes") + "forward" == "lanes:forward"``.
    """

    __slots__ = ()

    def __add__(self, other: str) -> TagKey:
        if not isinstance(other, str):
            return NotImplemented
        return TagKey(f"{str(self)}:{str(other)}")

    def __str__(self) -> str:
        return str.__str__(self)

    def __repr__(self) -> str:
        return f"TagKey({str(self)!r})"


class DuplicateKeyError(Exception):
    """A tag key was given more than once."""

    def __init__(self, key: str) -> None:
        self.key = TagKey(key)
        super().__init__(f"duplicate tag key {self.key}")


class ParseTagsError(ValueError):
    """Text could not be read as newline separated ``key=value`` tags."""


class MissingEqualsError(ParseTagsError):
    """A line of tag text has no ``=``."""

    def __init__(self, line: str) -> None:
        self.line = line
        super().__init__("tag must be = separated")


class Tags:
    """A map from tag keys to string values, always ordered by key."""

    def __init__(self) -> None:
        self._map: dict[TagKey, str] = {}

    # Construction

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[str, str]]) -> Tags:
        """Build from ``(key, value)`` pairs; a repeated key raises DuplicateKeyError."""
        tags = cls()
        for key, value in pairs:
            tags.checked_insert(key, value)
        return tags

    @classmethod
    def from_pair(cls, key: str, value: str) -> Tags:
        """Build tags holding a single pair."""
        tags = cls()
        tags._map[TagKey(key)] = str(value)
        return tags

    @classmethod
    def parse(cls, text: str) -> Tags:
        """Parse newline separated ``key=value`` lines."""
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        pairs = []
        for line in lines:
            if line.endswith("\r"):
                line = line[:-1]
            key, sep, value = line.partition("=")
            if not sep:
                raise MissingEqualsError(line)
            pairs.append((key, value))
        try:
            return cls.from_pairs(pairs)
        except DuplicateKeyError as err:
            raise ParseTagsError(str(err)) from err

    @classmethod
    def from_dict(cls, mapping: Mapping[str, str]) -> Tags:
        """Build from a mapping of string keys to string values."""
        tags = cls()
        for key, value in mapping.items():
            tags._insert_lenient(key, value)
        return tags

    @classmethod
    def from_json(cls, text: str) -> Tags:
        """Read a JSON object of string values.

        Repeated keys, which Overpass sometimes returns, are not an error.
        """
        pairs = json.loads(text, object_pairs_hook=list)
        if not isinstance(pairs, list) or not all(
            isinstance(item, tuple) for item in pairs
        ):
            raise ValueError("OSM tags must be a JSON object")
        tags = cls()
        for key, value in pairs:
            tags._insert_lenient(key, value)
        return tags

    def _insert_lenient(self, key: str, value: object) -> None:
        if not isinstance(value, str):
            raise ValueError(f"tag value for {key} must be a string")
        try:
            self.checked_insert(key, value)
        except DuplicateKeyError:
            pass

    # Output

    def to_dict(self) -> dict[str, str]:
        """A plain dict of the tags, ordered by key."""
        return {str(key): value for key, value in self.pairs()}

    def to_json(self) -> str:
        """Compact JSON object of the tags, ordered by key."""
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)

    def pairs(self) -> list[tuple[str, str]]:
        """All ``(key, value)`` pairs ordered by key."""
        return [(str(key), self._map[key]) for key in sorted(self._map)]

    def to_list(self) -> list[str]:
        """All tags as ``key=value`` strings ordered by key."""
        return [f"{key}={value}" for key, value in self.pairs()]

    def __str__(self) -> str:
        return "\n".join(self.to_list())

    def __repr__(self) -> str:
        return f"Tags({self.to_dict()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Tags):
            return NotImplemented
        return self._map == other._map

    # Mapping interface

    def __len__(self) -> int:
        return len(self._map)

    def __iter__(self) -> Iterator[TagKey]:
        return iter(sorted(self._map))

    def __contains__(self, key: object) -> bool:
        return key in self._map

    def __getitem__(self, key: str) -> str:
        return self._map[key]

    # Queries

    def get(self, key: str) -> str | None:
        """The value for ``key``, or None."""
        return self._map.get(key)

    def has(self, key: str, value: str) -> bool:
        """Whether ``key`` exists with exactly ``value``."""
        return self.get(key) == value

    def has_any(self, key: str, values: Iterable[str]) -> bool:
        """Whether ``key`` exists with one of ``values``."""
        current = self.get(key)
        return current is not None and current in values

    def subset(self, keys: Iterable[str]) -> Tags:
        """New tags holding only those of ``keys`` that are present."""
        result = Tags()
        for key in keys:
            value = self.get(key)
            if value is not None:
                result._map[TagKey(key)] = value
        return result

    def pairs_with_stem(self, stem: str) -> list[tuple[str, str]]:
        """Pairs whose key starts with ``stem``, ordered by key."""
        prefix = str(stem)
        return [(key, value) for key, value in self.pairs() if key.startswith(prefix)]

    # Mutation

    def checked_insert(self, key: str, value: str) -> None:
        """Insert a new pair.

        A key already present raises DuplicateKeyError, and the existing
        entry for that key is removed.
        """
        tag_key = TagKey(key)
        if tag_key in self._map:
            del self._map[tag_key]
            raise DuplicateKeyError(tag_key)
        self._map[tag_key] = str(value)