# unit_manager/catalog.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

log = logging.getLogger(__name__)


class Dimension(Enum):
    LENGTH = "length"
    WEIGHT = "weight"
    TEMPERATURE = "temperature"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Unit:
    key: str
    dimension: Dimension
    singular: str
    plural: str
    aliases: Tuple[str, ...] = ()

    def display(self, value: float) -> str:
        """Singular name for exactly 1.0, plural otherwise."""
        return self.singular if value == 1.0 else self.plural


class UnitCatalog:
    """
    Closed, read-only set of units with a token -> unit lookup table.

    Tokens are stored lower-cased; a token claimed by two units is a
    construction error.
    """

    def __init__(self, units: Iterable[Unit], *, unknown: Unit):
        self._units: Tuple[Unit, ...] = tuple(units)
        self._unknown = unknown
        self._by_token: Dict[str, Unit] = {}
        for u in self._units:
            if u.dimension is Dimension.UNKNOWN:
                raise ValueError(f"Unit '{u.key}' cannot use the UNKNOWN dimension.")
            for token in u.aliases:
                k = _normalize(token)
                if k in self._by_token:
                    raise ValueError(f"Duplicate unit token: {token}")
                self._by_token[k] = u

    @property
    def unknown(self) -> Unit:
        return self._unknown

    def resolve(self, text: str) -> Unit:
        unit = self._by_token.get(_normalize(text or ""))
        if unit is None:
            log.debug("No unit matches %r", text)
            return self._unknown
        return unit

    def units(self, dimension: Optional[Dimension] = None) -> List[Unit]:
        if dimension is None:
            return list(self._units)
        return [u for u in self._units if u.dimension is dimension]

    def tokens(self, unit: Unit) -> List[str]:
        return [t for t, u in self._by_token.items() if u is unit]

    def __contains__(self, unit: object) -> bool:
        return unit in self._units

    def __len__(self) -> int:
        return len(self._units)


def _normalize(text: str) -> str:
    # "degrees   celsius" and "Degrees Celsius" resolve alike
    return " ".join(text.lower().split())


# ---- Length (canonical: meter) ----
METER = Unit("METER", Dimension.LENGTH, "meter", "meters", ("m", "meter", "meters"))
KILOMETER = Unit("KILOMETER", Dimension.LENGTH, "kilometer", "kilometers", ("km", "kilometer", "kilometers"))
CENTIMETER = Unit("CENTIMETER", Dimension.LENGTH, "centimeter", "centimeters", ("cm", "centimeter", "centimeters"))
MILLIMETER = Unit("MILLIMETER", Dimension.LENGTH, "millimeter", "millimeters", ("mm", "millimeter", "millimeters"))
MILE = Unit("MILE", Dimension.LENGTH, "mile", "miles", ("mi", "mile", "miles"))
YARD = Unit("YARD", Dimension.LENGTH, "yard", "yards", ("yd", "yard", "yards"))
FOOT = Unit("FOOT", Dimension.LENGTH, "foot", "feet", ("ft", "foot", "feet"))
INCH = Unit("INCH", Dimension.LENGTH, "inch", "inches", ("in", "inch", "inches"))

# ---- Weight (canonical: gram) ----
GRAM = Unit("GRAM", Dimension.WEIGHT, "gram", "grams", ("g", "gram", "grams"))
KILOGRAM = Unit("KILOGRAM", Dimension.WEIGHT, "kilogram", "kilograms", ("kg", "kilogram", "kilograms"))
MILLIGRAM = Unit("MILLIGRAM", Dimension.WEIGHT, "milligram", "milligrams", ("mg", "milligram", "milligrams"))
POUND = Unit("POUND", Dimension.WEIGHT, "pound", "pounds", ("lb", "pound", "pounds"))
OUNCE = Unit("OUNCE", Dimension.WEIGHT, "ounce", "ounces", ("oz", "ounce", "ounces"))

# ---- Temperature ----
CELSIUS = Unit(
    "CELSIUS", Dimension.TEMPERATURE, "degree Celsius", "degrees Celsius",
    ("degree celsius", "degrees celsius", "celsius", "dc", "c"),
)
FAHRENHEIT = Unit(
    "FAHRENHEIT", Dimension.TEMPERATURE, "degree Fahrenheit", "degrees Fahrenheit",
    ("degree fahrenheit", "degrees fahrenheit", "fahrenheit", "df", "f"),
)
KELVIN = Unit("KELVIN", Dimension.TEMPERATURE, "kelvin", "kelvins", ("kelvin", "kelvins", "k"))

# Sentinel for "no match"; never a conversion endpoint.
UNKNOWN = Unit("UNKNOWN", Dimension.UNKNOWN, "???", "???")

CATALOG = UnitCatalog(
    units=(
        METER, KILOMETER, CENTIMETER, MILLIMETER, MILE, YARD, FOOT, INCH,
        GRAM, KILOGRAM, MILLIGRAM, POUND, OUNCE,
        CELSIUS, FAHRENHEIT, KELVIN,
    ),
    unknown=UNKNOWN,
)


def resolve(text: str) -> Unit:
    return CATALOG.resolve(text)
