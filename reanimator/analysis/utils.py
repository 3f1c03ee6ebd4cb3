"""Small numeric helpers shared by the analysis modules."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with .5 rounding up.

    Built-in ``round()`` rounds half to even, which would turn a 72.5 score
    into 72 instead of 73.
    """
    return math.floor(value + 0.5)
