"""Group key conversion"""

from __future__ import annotations

from decimal import Decimal
from math import isinf, isnan
from typing import Any

from .pyutils import Undefined

__all__ = ["to_key_string"]


def to_key_string(value: Any) -> str:
    """Convert a derived key to the string used as group key.

    Undefined becomes ``"undefined"`` and None becomes ``"null"``, booleans are
    rendered in lower case, and numbers in their shortest decimal form, so that
    ``1`` and ``1.0`` end up in the same group. Items of lists and tuples are
    joined with commas. Strings are used as they are, all other values are
    converted with :func:`str`.
    """
    if value is Undefined:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(int(value))
    if isinstance(value, float):
        return _float_to_str(value)
    if isinstance(value, (list, tuple)):
        return ",".join(
            "" if item is None or item is Undefined else to_key_string(item)
            for item in value
        )
    return str(value)


def _float_to_str(value: float) -> str:
    """Render a float in the shortest decimal form of a JavaScript number.

    Plain notation is used from 1e-6 up to 1e21, exponential notation with
    an unpadded exponent otherwise, e.g. ``"1e-7"`` or ``"1.5e+21"``.
    """
    if isnan(value):
        return "NaN"
    if isinf(value):
        return "-Infinity" if value < 0 else "Infinity"
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    _sign, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = "".join(map(str, digit_tuple)).rstrip("0")
    exponent += len(digit_tuple) - len(digits)
    num_digits = len(digits)
    # position of the decimal point relative to the start of the digits
    point = num_digits + exponent
    if num_digits <= point <= 21:
        return sign + digits + "0" * (point - num_digits)
    if 0 < point <= 21:
        return f"{sign}{digits[:point]}.{digits[point:]}"
    if -6 < point <= 0:
        return f"{sign}0.{'0' * -point}{digits}"
    power = point - 1
    power_str = f"+{power}" if power > 0 else str(power)
    mantissa = digits if num_digits == 1 else f"{digits[0]}.{digits[1:]}"
    return f"{sign}{mantissa}e{power_str}"
