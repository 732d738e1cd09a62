"""
Number formatting for DarkCalc
Converts floats to display text and display text back to floats
"""
import math

import config


class ParseFailure(ValueError):
    """Raised when display text is not a finite number"""


def parse_number(text):
    """Parse display text into a finite float.

    Raises ParseFailure for empty text, the error sentinel, anything
    float() rejects, and the textual infinities/NaN float() accepts.
    """
    if not text or text == config.ERROR_TEXT:
        raise ParseFailure(f"not a number: {text!r}")
    try:
        value = float(text)
    except ValueError as exc:
        raise ParseFailure(f"not a number: {text!r}") from exc
    if not math.isfinite(value):
        raise ParseFailure(f"not a finite number: {text!r}")
    return value


def parse_or_zero(text):
    """Parse display text, falling back to 0.0 for malformed input"""
    try:
        return parse_number(text)
    except ParseFailure:
        return 0.0


def _integer_text(value):
    nearest = round(value)
    if abs(value - nearest) < config.FORMAT_EPSILON:
        # int() also folds -0.0 into "0"
        return str(int(nearest))
    return None


def format_number(value: float) -> str:
    """Render a float for the display.

    Near-integers collapse to integer form, everything else gets up to
    FORMAT_SIGNIFICANT_DIGITS significant digits with trailing zeros
    trimmed. Non-finite values render as the error sentinel.
    """
    if not math.isfinite(value):
        return config.ERROR_TEXT

    text = _integer_text(value)
    if text is not None:
        return text

    text = "%.*g" % (config.FORMAT_SIGNIFICANT_DIGITS, value)
    # Rounding to 10 digits can itself land on an integer (1.23456789e+10)
    rounded = _integer_text(float(text))
    return rounded if rounded is not None else text
