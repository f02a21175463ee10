import math

import numpy as np
import pandas as pd

from models import InvestmentParameters, InvestmentResults
from finance.mortgage import amortization_schedule
from analytics.projection import project


def amortization_dataframe(params: InvestmentParameters) -> pd.DataFrame:
    """
    Year-end mortgage position over the rental phase (the only period the loan is serviced).
    Columns: Year, Balance, Cumulative interest, Cumulative principal.
    Year 0 is the starting principal; a partial final year is reported at its last month.
    """
    principal = project(params).mortgage_amount
    rows = amortization_schedule(
        principal, params.mortgage_rate, params.amortization_years, params.rent_years
    )

    years = [0]
    balances = [principal]
    cum_interest = [0.0]
    cum_principal = [0.0]
    interest = 0.0
    repaid = 0.0
    for row in rows:
        interest += row.interest
        repaid += row.principal
        if row.period % 12 == 0 or row is rows[-1]:
            years.append(math.ceil(row.period / 12))
            balances.append(row.balance)
            cum_interest.append(interest)
            cum_principal.append(repaid)

    return pd.DataFrame(
        {
            "Year": years,
            "Balance": balances,
            "Cumulative interest": cum_interest,
            "Cumulative principal": cum_principal,
        }
    )


def cost_breakdown_dataframe(res: InvestmentResults) -> pd.DataFrame:
    """Return DataFrame with categories and amounts for the cost mix chart."""
    data = {
        "Category": [
            "Transfer tax & legal (purchase)",
            "Mortgage interest",
            "Maintenance & repairs",
            "Strata",
            "Insurance",
            "Property tax",
            "Rental listing fee",
            "Selling costs",
        ],
        "Amount": [
            res.total_closing_costs,
            res.total_interest_paid,
            res.maintenance_repairs_total,
            res.strata_fee_total,
            res.insurance_total,
            res.property_tax_total,
            res.one_time_rent_realtor_fee,
            res.total_selling_costs,
        ],
    }
    return pd.DataFrame(data)


def horizon_profile_dataframe(
    params: InvestmentParameters, max_rental_years: int = 25
) -> pd.DataFrame:
    """
    How the return rates evolve as the rental phase varies from 0..max_rental_years,
    everything else held at the current inputs. Rates are in percent.
    """
    horizons = []
    roi = []
    roi_real = []
    avg = []
    avg_real = []

    for h in range(0, max_rental_years + 1):
        res_h = project(params.replace(rent_years=float(h)))
        horizons.append(h)
        roi.append(res_h.roi_rate * 100.0)
        roi_real.append(res_h.inflation_adjusted_roi_rate * 100.0)
        avg.append(res_h.avg_yearly_roi_rate * 100.0)
        avg_real.append(res_h.inflation_adjusted_avg_yearly_roi_rate * 100.0)

    return pd.DataFrame(
        {
            "Rental years": horizons,
            "ROI (%)": roi,
            "Infl.-adjusted ROI (%)": roi_real,
            "Avg yearly ROI (%)": avg,
            "Infl.-adjusted avg yearly ROI (%)": avg_real,
        }
    )


def appreciation_sensitivity_dataframe(params: InvestmentParameters, rates) -> pd.DataFrame:
    """Net profit and ROI across candidate yearly appreciation rates (given as ratios)."""
    rates = np.asarray(list(rates), dtype=float)
    results = [project(params.replace(yearly_appreciation_rate=float(g))) for g in rates]
    return pd.DataFrame(
        {
            "Appreciation (%)": rates * 100.0,
            "Sell price": [r.sell_price for r in results],
            "Net profit": [r.net_profit for r in results],
            "ROI (%)": [r.roi_rate * 100.0 for r in results],
            "Avg yearly ROI (%)": [r.avg_yearly_roi_rate * 100.0 for r in results],
        }
    )
