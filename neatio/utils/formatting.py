"""Scalar formatting shared by the text encoders."""

from __future__ import annotations

import math
from decimal import Decimal


def format_real(value: float) -> str:
    """Format a real number in ``%g`` style using the shortest round-trip digits.

    The digit string is the shortest one that parses back to the same float
    (what ``repr`` produces); the layout follows ``%g``: exponent form when the
    decimal exponent is below -4 or at least 6, plain decimal otherwise, and no
    trailing ``.0`` on integral values.

    >>> format_real(0.5), format_real(3.0), format_real(1e6), format_real(1.5e-05)
    ('0.5', '3', '1e+06', '1.5e-05')
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    sign = "-" if math.copysign(1.0, value) < 0 else ""
    if value == 0.0:
        return sign + "0"

    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    nd = len(digits)
    # position of the decimal point relative to the start of ``digits``
    dp = nd + int(exponent)
    exp = dp - 1

    if exp < -4 or exp >= 6:
        mantissa = digits[0] + ("." + digits[1:] if nd > 1 else "")
        return f"{sign}{mantissa}e{'+' if exp >= 0 else '-'}{abs(exp):02d}"
    if dp <= 0:
        return f"{sign}0.{'0' * -dp}{digits}"
    if dp >= nd:
        return sign + digits + "0" * (dp - nd)
    return f"{sign}{digits[:dp]}.{digits[dp:]}"


def format_bool(value: bool) -> str:
    return "true" if value else "false"


__all__ = ["format_real", "format_bool"]
