"""Float helpers shared by the health system variants."""

import math


def ratio(numerator: float, denominator: float) -> float:
    """Return ``numerator / denominator`` with IEEE semantics on a zero denominator.

    Python raises ``ZeroDivisionError`` for ``x / 0.0``; this returns ``inf``,
    ``-inf`` or ``nan`` instead so callers never see an exception.
    """
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator
