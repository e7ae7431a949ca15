# core/errors.py
from __future__ import annotations

from unit_manager.catalog import Dimension, Unit


class ConverterError(ValueError):
    """Base for user-facing conversion failures; str() is the printed message."""


class ParseError(ConverterError):
    def __init__(self, line: str = ""):
        ValueError.__init__(self, "Parse error.")
        self.line = line


class ImpossibleConversionError(ConverterError):
    def __init__(self, source: Unit, target: Unit):
        ValueError.__init__(
            self, f"Conversion from {source.plural} to {target.plural} is impossible"
        )
        self.source = source
        self.target = target


class NegativeValueError(ConverterError):
    def __init__(self, dimension: Dimension, value: float):
        ValueError.__init__(self, f"{dimension.value.capitalize()} shouldn't be negative.")
        self.dimension = dimension
        self.value = value
