# unit_manager/converter.py
from __future__ import annotations

import logging
from typing import Callable, Dict, Tuple

from unit_manager.catalog import (
    Dimension,
    Unit,
    METER, KILOMETER, CENTIMETER, MILLIMETER, MILE, YARD, FOOT, INCH,
    GRAM, KILOGRAM, MILLIGRAM, POUND, OUNCE,
    CELSIUS, FAHRENHEIT, KELVIN,
)

log = logging.getLogger(__name__)

# Factor to the canonical unit as (numerator, denominator):
# to canonical = value * num / den, from canonical = value * den / num.
_LENGTH_TO_M: Dict[Unit, Tuple[float, float]] = {
    METER: (1.0, 1.0),
    KILOMETER: (1000.0, 1.0),
    CENTIMETER: (1.0, 100.0),
    MILLIMETER: (1.0, 1000.0),
    MILE: (1609.35, 1.0),
    YARD: (0.9144, 1.0),
    FOOT: (0.3048, 1.0),
    INCH: (0.0254, 1.0),
}

_WEIGHT_TO_G: Dict[Unit, Tuple[float, float]] = {
    GRAM: (1.0, 1.0),
    KILOGRAM: (1000.0, 1.0),
    MILLIGRAM: (1.0, 1000.0),
    POUND: (453.592, 1.0),
    OUNCE: (28.3495, 1.0),
}

_FACTORS: Dict[Dimension, Dict[Unit, Tuple[float, float]]] = {
    Dimension.LENGTH: _LENGTH_TO_M,
    Dimension.WEIGHT: _WEIGHT_TO_G,
}

_TEMPERATURE: Dict[Tuple[Unit, Unit], Callable[[float], float]] = {
    (CELSIUS, FAHRENHEIT): lambda v: v * 9 / 5 + 32,
    (FAHRENHEIT, CELSIUS): lambda v: (v - 32) * 5 / 9,
    (CELSIUS, KELVIN): lambda v: v + 273.15,
    (KELVIN, CELSIUS): lambda v: v - 273.15,
    (FAHRENHEIT, KELVIN): lambda v: (v + 459.67) * 5 / 9,
    (KELVIN, FAHRENHEIT): lambda v: v * 9 / 5 - 459.67,
}


def _factor(unit: Unit) -> Tuple[float, float]:
    try:
        return _FACTORS[unit.dimension][unit]
    except KeyError as e:
        raise ValueError(f"No scale factor for unit '{unit.key}'.") from e


def to_canonical(value: float, unit: Unit) -> float:
    """Length in meters / weight in grams."""
    num, den = _factor(unit)
    return value * num / den


def from_canonical(value: float, unit: Unit) -> float:
    num, den = _factor(unit)
    return value * den / num


def _convert_scaled(value: float, from_unit: Unit, to_unit: Unit, dimension: Dimension) -> float:
    if from_unit.dimension is not dimension or to_unit.dimension is not dimension:
        raise ValueError(
            f"Expected two {dimension.value} units, got '{from_unit.key}' and '{to_unit.key}'."
        )
    if from_unit == to_unit:
        return value
    return from_canonical(to_canonical(value, from_unit), to_unit)


def convert_length(value: float, from_unit: Unit, to_unit: Unit) -> float:
    return _convert_scaled(value, from_unit, to_unit, Dimension.LENGTH)


def convert_weight(value: float, from_unit: Unit, to_unit: Unit) -> float:
    return _convert_scaled(value, from_unit, to_unit, Dimension.WEIGHT)


def convert_temperature(value: float, from_unit: Unit, to_unit: Unit) -> float:
    if from_unit.dimension is not Dimension.TEMPERATURE or to_unit.dimension is not Dimension.TEMPERATURE:
        raise ValueError(
            f"Expected two temperature units, got '{from_unit.key}' and '{to_unit.key}'."
        )
    if from_unit == to_unit:
        return value
    return _TEMPERATURE[(from_unit, to_unit)](value)


_DISPATCH: Dict[Dimension, Callable[[float, Unit, Unit], float]] = {
    Dimension.LENGTH: convert_length,
    Dimension.WEIGHT: convert_weight,
    Dimension.TEMPERATURE: convert_temperature,
}


def convert(value: float, from_unit: Unit, to_unit: Unit) -> float:
    """
    Convert `value` from `from_unit` to `to_unit`.

    Both units must share a dimension other than UNKNOWN; anything else
    raises ValueError. Callers that talk to users validate first.
    """
    fn = _DISPATCH.get(from_unit.dimension)
    if fn is None:
        raise ValueError(f"Cannot convert from '{from_unit.key}'.")
    result = fn(value, from_unit, to_unit)
    log.debug("convert %r %s -> %r %s", value, from_unit.key, result, to_unit.key)
    return result
