import math
from decimal import ROUND_HALF_DOWN, ROUND_HALF_UP, Decimal

DEFAULT_MAX_DECIMALS = 10
ERROR_TEXT = "Error"

# magnitudes shown in positional notation, everything else in scientific
POSITIONAL_MIN = Decimal("1e-6")
POSITIONAL_MAX = Decimal("1e21")


def _round_half_toward_positive(value: Decimal, max_decimals: int) -> Decimal:
    if value.as_tuple().exponent >= -max_decimals:
        return value
    # ties go toward +infinity: 2.5 -> 3, -2.5 -> -2
    rounding = ROUND_HALF_UP if value >= 0 else ROUND_HALF_DOWN
    return value.quantize(Decimal(1).scaleb(-max_decimals), rounding=rounding)


def format_number(value: float, max_decimals: int = DEFAULT_MAX_DECIMALS) -> str:
    """Display form of a calculation result.

    The value is rounded to ``max_decimals`` places, which hides binary
    representation noise (``0.1 + 0.2`` shows as ``0.3``), and then printed
    in its shortest form without trailing zeros: ``5`` rather than ``5.0``.
    Halves round up. Magnitudes below ``1e-6`` or from ``1e21`` on use
    exponent notation (``5e-7``, ``1e+21``). Infinities and NaN become
    ``"Error"``.
    """
    if not math.isfinite(value):
        return ERROR_TEXT

    rounded = _round_half_toward_positive(Decimal(repr(value)), max_decimals)
    if rounded.is_zero():
        return "0"  # also folds -0.0

    shortest = rounded.normalize()
    if POSITIONAL_MIN <= abs(shortest) < POSITIONAL_MAX:
        return format(shortest, "f")
    return format(shortest, "e")
