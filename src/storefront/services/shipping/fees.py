"""Distance-tiered delivery fee schedule."""

from __future__ import annotations

import math

BRACKET_WIDTH_KM = 5.0
BRACKET_FEE = 500
# Fee table for the first three brackets, keyed by inclusive upper bound (km)
BASE_BRACKETS: tuple[tuple[float, int], ...] = (
    (5.0, 0),
    (10.0, 500),
    (15.0, 1000),
)


def calculate_shipping_fee(distance_km: float) -> int:
    """Return the delivery fee in pesos for a distance from the store.

    Bracket upper bounds are inclusive: 5.0 km is free, 10.0 km costs 500.
    Beyond 15 km every started 5 km adds another 500. Negative distances are
    not rejected and land in the free bracket.
    """
    for upper_bound, fee in BASE_BRACKETS:
        if distance_km <= upper_bound:
            return fee

    last_bound, last_fee = BASE_BRACKETS[-1]
    additional_brackets = math.ceil((distance_km - last_bound) / BRACKET_WIDTH_KM)
    return last_fee + additional_brackets * BRACKET_FEE
