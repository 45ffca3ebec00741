import math
import random
import re
from decimal import ROUND_HALF_UP, Context, Decimal


_THOUSANDS = re.compile(r"\B(?=(\d{3})+(?!\d))")
# Wide enough for any finite float at the digit counts money formatting uses.
_FIXED_POINT = Context(prec=500, rounding=ROUND_HALF_UP)


def _to_fixed(num: float, digits: int) -> str:
    # Rounds the exact binary value, ties away from zero.
    if math.isnan(num):
        return "NaN"
    if math.isinf(num):
        return "Infinity" if num > 0 else "-Infinity"
    if abs(num) >= 1e21:
        # Exponent form from 1e21 up: 1e21 gives "1e+21"
        return repr(float(num))
    if num == 0:
        num = 0
    quantum = Decimal(1).scaleb(-digits)
    return format(Decimal(num).quantize(quantum, context=_FIXED_POINT), "f")


def format_money(num: float, digits: int = 2) -> str:
    """Format ``num`` with ``digits`` decimals and comma-separated thousands.

    The sign stays in front of the first digit: ``-1234.5`` gives
    ``"-1,234.50"``.
    """
    return _THOUSANDS.sub(",", _to_fixed(num, digits))


def random_num(min_value: int, max_value: int) -> int:
    """Uniform integer in ``[min_value, max_value]``.

    Uses the ``random`` module, so the result is not suitable for security
    purposes. Bounds are not validated.
    """
    return math.floor(random.random() * (max_value - min_value + 1)) + min_value
