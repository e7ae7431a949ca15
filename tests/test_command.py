# tests/test_command.py

import pytest

from core.command import (
    ConversionRequest,
    execute,
    format_number,
    handle_command,
    parse_command,
)
from core.errors import (
    ConverterError,
    ImpossibleConversionError,
    NegativeValueError,
    ParseError,
)
from unit_manager import UNKNOWN, Dimension
from unit_manager.catalog import CELSIUS, FAHRENHEIT, FOOT, KILOMETER, METER


def _text(line):
    return handle_command(line).text


def test_success_reply_is_flagged_ok():
    reply = handle_command("5 km to m")
    assert reply.ok is True
    assert reply.text == "5.0 kilometers is 5000.0 meters"


@pytest.mark.parametrize(
    "line, expected",
    [
        ("5 m to kg", "Conversion from meters to kilograms is impossible"),
        ("-3 m to ft", "Length shouldn't be negative."),
        ("banana", "Parse error."),
    ],
)
def test_error_reply_carries_message(line, expected):
    reply = handle_command(line)
    assert reply.ok is False
    assert reply.text == expected


def test_parse_multi_word_phrases():
    req = parse_command("10 degrees Celsius convertto degrees Fahrenheit")
    assert req == ConversionRequest(value=10.0, source=CELSIUS, target=FAHRENHEIT)


def test_keyword_is_case_insensitive():
    req = parse_command("3 KM IN m")
    assert req.source is KILOMETER
    assert req.target is METER


def test_first_keyword_wins():
    """'in' doubles as the inch token; the first keyword splits the line."""
    with pytest.raises(ImpossibleConversionError) as exc:
        parse_command("5 in to cm")
    assert str(exc.value) == "Conversion from ??? to ??? is impossible"


@pytest.mark.parametrize(
    "line",
    [
        "5 km m",             # too short
        "five km to m",       # non-numeric operand
        "5 km into m x",      # no keyword
        "5 km m to",          # keyword is the last token
        "2 km as m",          # "as" is not a keyword
        "1_000 m to km",      # no digit separators
        "nan km to m",        # only the exact spelling NaN
        "inf km to m",        # only the exact spelling Infinity
        "0x10 m to km",       # hex needs a binary exponent
    ],
)
def test_parse_errors(line):
    with pytest.raises(ParseError) as exc:
        parse_command(line)
    assert str(exc.value) == "Parse error."


@pytest.mark.parametrize(
    "line, expected",
    [
        ("1e3 g to kg", "1000.0 grams is 1.0 kilogram"),
        ("2.5d m to cm", "2.5 meters is 250.0 centimeters"),
        ("+4f m to m", "4.0 meters is 4.0 meters"),
        (".5 km to m", "0.5 kilometers is 500.0 meters"),
        ("0x1.8p1 m to cm", "3.0 meters is 300.0 centimeters"),
        ("NaN c to f", "NaN degrees Celsius is NaN degrees Fahrenheit"),
        ("Infinity m to km", "Infinity meters is Infinity kilometers"),
        ("-Infinity c to k", "-Infinity degrees Celsius is -Infinity kelvins"),
    ],
)
def test_operand_accepts_jvm_number_literals(line, expected):
    assert _text(line) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.0, "0.0"),
        (-0.0, "-0.0"),
        (5.0, "5.0"),
        (0.001, "0.001"),
        (9999999.0, "9999999.0"),
        (22.046244201837776, "22.046244201837776"),
        (1e-06, "1.0E-6"),
        (0.000999, "9.99E-4"),
        (-2.5e-4, "-2.5E-4"),
        (1e7, "1.0E7"),
        (12345678.9, "1.23456789E7"),
        (1e21, "1.0E21"),
        (float("nan"), "NaN"),
        (float("inf"), "Infinity"),
        (float("-inf"), "-Infinity"),
    ],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_scientific_notation_for_small_and_large_results():
    assert _text("1 mm to km") == "1.0 millimeter is 1.0E-6 kilometers"
    assert _text("10000 km to m") == "10000.0 kilometers is 1.0E7 meters"


def test_scientific_notation_for_operand():
    assert _text("20000000 m to km") == "2.0E7 meters is 20000.0 kilometers"


def test_unknown_unit_reported_with_placeholder():
    assert _text("5 xyz to m") == "Conversion from ??? to meters is impossible"
    assert _text("5 m to xyz") == "Conversion from meters to ??? is impossible"


def test_cross_dimension_is_impossible():
    with pytest.raises(ImpossibleConversionError) as exc:
        parse_command("1 kelvin to grams")
    assert exc.value.source.dimension is Dimension.TEMPERATURE
    assert exc.value.target.dimension is Dimension.WEIGHT
    assert str(exc.value) == "Conversion from kelvins to grams is impossible"


def test_negative_weight_rejected():
    with pytest.raises(NegativeValueError) as exc:
        parse_command("-1 kg to g")
    assert str(exc.value) == "Weight shouldn't be negative."
    assert exc.value.dimension is Dimension.WEIGHT


def test_negative_temperature_accepted():
    assert _text("-40 c to f") == "-40.0 degrees Celsius is -40.0 degrees Fahrenheit"


def test_dimension_checked_before_sign():
    """Negative operand with an unknown unit reports the unit problem first."""
    assert _text("-3 m to xyz") == "Conversion from meters to ??? is impossible"


def test_singular_on_converted_value_of_one():
    assert _text("100 cm to m") == "100.0 centimeters is 1.0 meter"


def test_execute_returns_structured_result():
    result = execute(ConversionRequest(value=1.0, source=FOOT, target=METER))
    assert result.converted == pytest.approx(0.3048)
    assert result.describe() == f"1.0 foot is {format_number(result.converted)} meters"


def test_errors_share_base_class():
    for err in (ParseError("x"), ImpossibleConversionError(UNKNOWN, UNKNOWN),
                NegativeValueError(Dimension.LENGTH, -1.0)):
        assert isinstance(err, ConverterError)
        assert isinstance(err, ValueError)
