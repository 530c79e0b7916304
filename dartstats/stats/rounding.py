"""
Half-up rounding used for every stored and derived statistic.

Python's ``round`` rounds half to even; saved records were rounded half up
(``floor(x * 10^n + 0.5) / 10^n``), so all statistics go through here.
"""
import math


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round ``value`` to ``ndigits`` decimals, ties away from -inf."""
    scale = 10 ** ndigits
    return math.floor(value * scale + 0.5) / scale
