# core/command.py
from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Sequence

from core.errors import (
    ConverterError,
    ImpossibleConversionError,
    NegativeValueError,
    ParseError,
)
from unit_manager import Dimension, Unit, convert, resolve

log = logging.getLogger(__name__)

KEYWORDS: tuple[str, ...] = ("to", "in", "convertto")

# Sign check applies only where a negative magnitude is meaningless.
_NON_NEGATIVE = (Dimension.LENGTH, Dimension.WEIGHT)

# JVM floating literal grammar: decimal or hex (binary exponent required),
# optional f/d suffix, NaN and Infinity. No underscores, no "inf"/"nan".
_DECIMAL_RE = re.compile(r"[+-]?(?:NaN|Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?[fFdD]?)")
_HEX_RE = re.compile(r"([+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?\d+)[fFdD]?")

# Plain decimal notation inside [1e-3, 1e7), scientific outside.
_PLAIN_MIN = 1e-3
_PLAIN_MAX = 1e7


def format_number(value: float) -> str:
    """
    Render a float the way the JVM prints a Double:
    "5.0", "0.001", "1.0E7", "1.234E-5", "NaN", "-Infinity".
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0 or _PLAIN_MIN <= abs(value) < _PLAIN_MAX:
        return repr(value)

    sign, digits, exp = Decimal(repr(value)).normalize().as_tuple()
    exponent = len(digits) - 1 + exp
    fraction = "".join(str(d) for d in digits[1:]) or "0"
    return f"{'-' if sign else ''}{digits[0]}.{fraction}E{exponent}"


@dataclass(frozen=True)
class ConversionRequest:
    value: float
    source: Unit
    target: Unit


@dataclass(frozen=True)
class ConversionResult:
    request: ConversionRequest
    converted: float

    def describe(self) -> str:
        r = self.request
        return (
            f"{format_number(r.value)} {r.source.display(r.value)} is "
            f"{format_number(self.converted)} {r.target.display(self.converted)}"
        )


@dataclass(frozen=True)
class CommandReply:
    text: str
    ok: bool


def _parse_number(token: str, line: str) -> float:
    m = _HEX_RE.fullmatch(token)
    if m:
        return float.fromhex(m.group(1))
    if not _DECIMAL_RE.fullmatch(token):
        raise ParseError(line)
    return float(token.rstrip("fFdD"))


def _find_keyword(parts: Sequence[str]) -> int:
    for i, part in enumerate(parts):
        if part.lower() in KEYWORDS:
            return i
    return -1


def parse_command(line: str) -> ConversionRequest:
    """
    Turn "<number> <source phrase> <keyword> <target phrase>" into a request.

    Checks run in a fixed order: shape, operand, keyword, unit resolution,
    shared dimension, then sign. Each failure raises the matching
    ConverterError subclass.
    """
    parts = line.split()
    if len(parts) < 4:
        raise ParseError(line)

    value = _parse_number(parts[0], line)

    idx = _find_keyword(parts)
    if idx == -1 or idx >= len(parts) - 1:
        raise ParseError(line)

    source = resolve(" ".join(parts[1:idx]))
    target = resolve(" ".join(parts[idx + 1:]))

    if source.dimension is Dimension.UNKNOWN or target.dimension is Dimension.UNKNOWN:
        raise ImpossibleConversionError(source, target)
    if source.dimension is not target.dimension:
        raise ImpossibleConversionError(source, target)

    if source.dimension in _NON_NEGATIVE and value < 0:
        raise NegativeValueError(source.dimension, value)

    request = ConversionRequest(value=value, source=source, target=target)
    log.debug("Parsed %r -> %s", line, request)
    return request


def execute(request: ConversionRequest) -> ConversionResult:
    converted = convert(request.value, request.source, request.target)
    return ConversionResult(request=request, converted=converted)


def handle_command(line: str) -> CommandReply:
    """Result sentence for a command line, or the error message to show instead."""
    try:
        result = execute(parse_command(line))
    except ConverterError as e:
        log.debug("Rejected %r: %s", line, e)
        return CommandReply(text=str(e), ok=False)
    return CommandReply(text=result.describe(), ok=True)
