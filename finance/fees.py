def threshold_fee(
    base: float, threshold: float, rate_until: float, rate_above: float
) -> float:
    """
    Progressive fee with a single breakpoint.

    The first `threshold` of `base` is charged at `rate_until`, only the excess
    above it at `rate_above`, so the schedule is continuous at the breakpoint.
    Used both for property transfer tax (purchase price, purchase-side schedule)
    and realtor commission (sale price, sale-side schedule).

    No guarding: a zero or negative threshold degenerates to a flat
    `rate_above` on the excess.
    """
    if base <= threshold:
        return base * rate_until
    return threshold * rate_until + (base - threshold) * rate_above
