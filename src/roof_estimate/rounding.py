"""Rounding shared by every figure the engine reports."""

import math

from .errors import InvalidInputError


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round with halves going toward positive infinity.

    Python's ``round`` rounds halves to even, which would shift estimates
    and pitch ratios on ``.5`` boundaries (``round(2.5) == 2``, here ``3``).
    The fraction is compared after flooring, so ``0.49999999999999994``
    stays ``0``.

    Raises:
        InvalidInputError: if the value to round is not finite.
    """
    scale = 10 ** ndigits
    scaled = value * scale
    if not math.isfinite(scaled):
        raise InvalidInputError(f"Cannot round non-finite value {value!r}")
    floor = math.floor(scaled)
    if scaled - floor >= 0.5:
        floor += 1
    return floor / scale
