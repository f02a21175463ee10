from dataclasses import dataclass
from typing import Iterator

import numpy as np


@dataclass(frozen=True)
class MortgageSummary:
    monthly_payment: float
    interest_paid: float
    principal_repaid: float
    principal: float

    @property
    def remaining_principal(self) -> float:
        return self.principal - self.principal_repaid


@dataclass(frozen=True)
class SchedulePeriod:
    period: int  # 1-based month index
    payment: float
    interest: float
    principal: float
    balance: float


def monthly_payment(principal: float, annual_rate: float, amortization_years: float) -> float:
    """Fixed monthly payment of a standard amortizing loan.

    Zero or negative terms are not rejected: they come back as inf/NaN.
    """
    r = np.float64(annual_rate) / 12.0
    n = np.float64(amortization_years) * 12
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        if r == 0:
            return np.float64(principal) / n
        return np.float64(principal) * r / (1 - (1 + r) ** -n)


def _walk(
    principal: float, annual_rate: float, amortization_years: float, holding_years: float
) -> Iterator[SchedulePeriod]:
    payment = monthly_payment(principal, annual_rate, amortization_years)
    r_m = np.float64(annual_rate) / 12.0
    months = np.float64(holding_years) * 12
    if np.isposinf(months):
        # an unbounded horizon walks at most the full term
        term = np.float64(amortization_years) * 12
        months = term if np.isfinite(term) else np.float64(0.0)
    bal = np.float64(principal)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        period = 0
        while period < months:
            if bal <= 0:
                break  # loan retired before the horizon
            interest = bal * r_m
            principal_part = payment - interest
            if principal_part > bal:
                principal_part = bal
            bal = bal - principal_part
            period += 1
            yield SchedulePeriod(
                period=period,
                payment=float(interest + principal_part),
                interest=float(interest),
                principal=float(principal_part),
                balance=float(bal),
            )


def amortize(
    principal: float, annual_rate: float, amortization_years: float, holding_years: float
) -> MortgageSummary:
    """Walk the payment schedule for `holding_years` of an `amortization_years` loan.

    Returns the fixed payment, the interest paid and the principal repaid
    over the holding horizon (which may be shorter than the term).
    """
    payment = monthly_payment(principal, annual_rate, amortization_years)
    start = np.float64(principal)
    interest_total = np.float64(0.0)
    bal = start
    for row in _walk(principal, annual_rate, amortization_years, holding_years):
        interest_total += row.interest
        bal = np.float64(row.balance)

    with np.errstate(invalid="ignore"):
        principal_repaid = start - bal
    return MortgageSummary(
        monthly_payment=float(payment),
        interest_paid=float(interest_total),
        principal_repaid=float(principal_repaid),
        principal=float(start),
    )


def amortization_schedule(
    principal: float, annual_rate: float, amortization_years: float, holding_years: float
) -> list:
    """Month-by-month rows of the same walk `amortize` performs."""
    return list(_walk(principal, annual_rate, amortization_years, holding_years))
