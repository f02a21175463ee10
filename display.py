import math
from numbers import Real
from typing import Optional

from models import InvestmentResults

PLACEHOLDER = "—"

# (section, [(label, field), ...]) in result-table order
RESULT_SECTIONS = [
    (
        "Acquisition",
        [
            ("Purchase Price Listing", "purchase_price_listing"),
            ("Total Purchase Price w/ GST", "total_purchase_price_with_gst"),
            ("Downpayment", "downpayment"),
            ("Mortgage Amount", "mortgage_amount"),
            ("Closing Costs (purchase)", "total_closing_costs"),
            ("Property Transfer Tax", "property_transfer_tax"),
            ("Legal/Notary on purchase", "closing_legal_notary_fees"),
            ("Adjusted Cost Base", "adjusted_cost_base"),
        ],
    ),
    (
        "Financing",
        [
            ("Monthly Mortgage Payment", "monthly_payment"),
            ("Mortgage Interest Total", "total_interest_paid"),
            ("Mortgage principal repaid", "principal_paid"),
            ("Remaining Mortgage principal", "remaining_principal"),
        ],
    ),
    (
        "Sale",
        [
            ("Selling Price (after appreciation)", "sell_price"),
            ("Selling Costs (total)", "total_selling_costs"),
            ("Realtor Fee on sale", "realtor_fee_on_sale"),
            ("Legal/Notary on sale", "selling_legal_notary"),
            ("Mortgage termination (approx)", "var_mortgage_termination"),
        ],
    ),
    (
        "Rental phase",
        [
            ("One-time rent realtor fee", "one_time_rent_realtor_fee"),
            ("Maintenance/repairs total", "maintenance_repairs_total"),
            ("Strata fee total", "strata_fee_total"),
            ("Insurance total", "insurance_total"),
            ("Mortgage interest total", "total_interest_paid"),
            ("Property tax total", "property_tax_total"),
            ("Gross rental income", "gross_rental_income_total"),
            ("Net rental income", "net_rental_income_total"),
        ],
    ),
    (
        "Returns",
        [
            ("Capital gain", "capital_gain"),
            ("Net capital gain after tax", "net_capital_gain_after_tax"),
            ("Invested amount", "invested_amount"),
            ("Net profit (Cap. gain + Rent)", "net_profit"),
            ("Inflation-adjusted net profit", "inflation_adjusted_net_profit"),
            ("ROI rate (%)", "roi_rate"),
            ("Infl.-adjusted ROI rate (%)", "inflation_adjusted_roi_rate"),
            ("Avg yearly ROI rate (%)", "avg_yearly_roi_rate"),
            ("Infl.-adjusted avg yearly ROI (%)", "inflation_adjusted_avg_yearly_roi_rate"),
        ],
    ),
]


def _finite(value) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def format_amount(value) -> str:
    if not _finite(value):
        return PLACEHOLDER
    return f"{value:,.2f}"


def format_percent(rate) -> str:
    """Ratio to percentage text, e.g. 0.0512 -> '5.12'."""
    if not _finite(rate):
        return PLACEHOLDER
    return f"{rate * 100:.2f}"


def format_field(name: str, value) -> str:
    if name in InvestmentResults.RATE_FIELDS:
        return format_percent(value)
    return format_amount(value)


def results_table(res: InvestmentResults, section: Optional[str] = None) -> list:
    """[(label, formatted value), ...] for one section, or all sections when `section` is None."""
    values = res.as_dict()
    rows = []
    for name, entries in RESULT_SECTIONS:
        if section is not None and name != section:
            continue
        for label, field in entries:
            rows.append((label, format_field(field, values.get(field))))
    return rows


def non_finite_fields(res: InvestmentResults) -> list:
    return [name for name, value in res.as_dict().items() if not _finite(value)]
