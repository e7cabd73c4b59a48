"""Lengths in metres and vehicle speeds."""

from __future__ import annotations

import json
import math
import sys
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, ClassVar

__all__ = [
    "Metre",
    "Speed",
    "SpeedError",
    "SpeedUnit",
    "metre_sum",
]


@dataclass(frozen=True, order=True)
class Metre:
    """A length in metres."""

    value: float = 0.0

    MIN: ClassVar[Metre]
    MAX: ClassVar[Metre]

    def __add__(self, other: object) -> Metre:
        if not isinstance(other, Metre):
            return NotImplemented
        return Metre(self.value + other.value)

    def __mul__(self, factor: object) -> Metre:
        if isinstance(factor, bool) or not isinstance(factor, (int, float)):
            return NotImplemented
        return Metre(factor * self.value)

    def __rmul__(self, factor: object) -> Metre:
        return self.__mul__(factor)


Metre.MIN = Metre(-sys.float_info.max)
Metre.MAX = Metre(sys.float_info.max)


def metre_sum(metres: Iterable[Metre]) -> Metre:
    """Total of ``metres``; zero for none."""
    return Metre(sum(metre.value for metre in metres))


def _format_float(value: float) -> str:
    """Shortest plain decimal form, without a trailing ``.0``."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == 0 and math.copysign(1.0, value) < 0:
        return "-0"
    if value.is_integer():
        return str(int(value))
    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    return text


def _parse_float(text: str) -> float:
    if not text.isascii() or text.strip() != text or "_" in text:
        raise SpeedError("invalid float literal")
    try:
        return float(text)
    except ValueError:
        raise SpeedError("invalid float literal") from None


class SpeedUnit(Enum):
    """Unit a speed is given in."""

    KPH = "kph"
    MPH = "mph"
    KNOTS = "knots"


_KPH_FACTOR = {
    SpeedUnit.KPH: 1.0,
    SpeedUnit.MPH: 1.60934,
    SpeedUnit.KNOTS: 1.852,
}


class SpeedError(ValueError):
    """A speed value could not be read."""


@dataclass(frozen=True)
class Speed:
    """A vehicle speed, such as a speed limit."""

    value: float
    unit: SpeedUnit = SpeedUnit.KPH

    @classmethod
    def parse(cls, text: str) -> Speed:
        """Read OSM speed text: ``50``, ``30 mph`` or ``10 knots``.

        Speeds below 0 or above 300 km/h are out of range.
        """
        if not text:
            raise SpeedError("empty")
        number, sep, unit_text = text.partition(" ")
        if not sep:
            unit = SpeedUnit.KPH
        elif unit_text in (SpeedUnit.MPH.value, SpeedUnit.KNOTS.value):
            unit = SpeedUnit(unit_text)
        else:
            raise SpeedError(f"unknown unit '{unit_text}'")
        speed = cls(_parse_float(number), unit)
        kph = speed.kph()
        if kph < 0.0 or kph > 300.0:
            raise SpeedError("out of range")
        return speed

    def kph(self) -> float:
        """The speed in kilometres per hour."""
        if self.unit is SpeedUnit.KPH:
            return self.value
        return _KPH_FACTOR[self.unit] * self.value

    def __str__(self) -> str:
        number = _format_float(self.value)
        if self.unit is SpeedUnit.KPH:
            return number
        return f"{number} {self.unit.value}"

    def to_json_value(self) -> float | dict[str, Any]:
        """A bare number for km/h, else a ``unit``/``value`` map."""
        if self.unit is SpeedUnit.KPH:
            return float(self.value)
        return {"unit": self.unit.value, "value": float(self.value)}

    @classmethod
    def from_json_value(cls, value: Any) -> Speed:
        """Inverse of to_json_value; a ``kph`` map is accepted too."""
        if isinstance(value, bool):
            raise ValueError("speed must be a number or a map")
        if isinstance(value, int):
            if not -(2**31) <= value < 2**32:
                raise ValueError(f"speed {value} out of integer range")
            return cls(float(value))
        if isinstance(value, float):
            return cls(value)
        if isinstance(value, Mapping):
            try:
                unit = SpeedUnit(value["unit"])
                number = value["value"]
            except (KeyError, ValueError, TypeError) as err:
                raise ValueError(f"invalid speed {value!r}") from err
            if isinstance(number, bool) or not isinstance(number, (int, float)):
                raise ValueError(f"invalid speed value {number!r}")
            return cls(float(number), unit)
        raise ValueError("speed must be a number or a map")

    def to_json(self) -> str:
        """Compact JSON text of to_json_value."""
        return json.dumps(self.to_json_value(), separators=(",", ":"))

    @classmethod
    def from_json(cls, text: str) -> Speed:
        """Read JSON text written by to_json."""
        return cls.from_json_value(json.loads(text))