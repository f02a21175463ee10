from dataclasses import dataclass, fields, asdict
from numbers import Real
from typing import Mapping

# Units used below:
#   amount  -> currency
#   rate    -> ratio, e.g. 0.05 for 5% (never pre-multiplied by 100)
#   years   -> year count (float; the form accepts fractional years)
#   monthly / yearly amounts are per-period currency


@dataclass(frozen=True)
class InvestmentParameters:
    # Acquisition
    purchase_price_listing: float = 0.0  # amount, pre-GST
    gst_rate: float = 0.0  # rate
    downpayment_percent: float = 0.0  # rate of the GST-inclusive price
    # Financing
    mortgage_rate: float = 0.0  # rate, annual
    amortization_years: float = 0.0  # years
    # Horizon
    development_years: float = 0.0  # years
    rent_years: float = 0.0  # years
    # Market
    yearly_appreciation_rate: float = 0.0  # rate
    inflation_rate: float = 0.0  # rate
    marginal_tax_rate: float = 0.0  # rate
    # Realtor commission on sale
    realtor_fee_rate_threshold: float = 0.0  # amount
    realtor_fee_rate_until_threshold: float = 0.0  # rate
    realtor_fee_rate_above_threshold: float = 0.0  # rate
    # Property transfer tax on purchase
    property_transfer_tax_rate_threshold: float = 0.0  # amount
    property_transfer_tax_rate_until_threshold: float = 0.0  # rate
    property_transfer_tax_rate_above_threshold: float = 0.0  # rate
    # Rental
    starting_rent_per_month: float = 0.0  # monthly amount, held flat
    # Transaction costs
    closing_legal_notary_fees: float = 0.0  # amount
    selling_legal_notary_fees: float = 0.0  # amount
    # Holding costs
    maintenance_repairs_monthly: float = 0.0  # monthly amount
    strata_fee_monthly: float = 0.0  # monthly amount
    insurance_monthly: float = 0.0  # monthly amount
    property_tax_yearly: float = 0.0  # yearly amount

    @classmethod
    def field_names(cls) -> list:
        return [f.name for f in fields(cls)]

    @classmethod
    def from_mapping(cls, values: Mapping) -> "InvestmentParameters":
        """Build from an already-numeric mapping. Unknown keys are ignored, missing ones are 0.0."""
        kwargs = {}
        for name in cls.field_names():
            value = values.get(name, 0.0)
            if isinstance(value, bool) or not isinstance(value, Real):
                raise TypeError(f"{name} must be a number, got {type(value).__name__}")
            kwargs[name] = float(value)
        return cls(**kwargs)

    @property
    def total_investment_years(self) -> float:
        return self.development_years + self.rent_years

    def replace(self, **changes) -> "InvestmentParameters":
        return InvestmentParameters(**{**asdict(self), **changes})

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class InvestmentResults:
    # Acquisition
    purchase_price_listing: float  # amount
    total_purchase_price_with_gst: float  # amount
    downpayment: float  # amount
    mortgage_amount: float  # amount
    # Financing
    monthly_payment: float  # monthly amount
    total_interest_paid: float  # amount, over the rental phase
    principal_paid: float  # amount
    remaining_principal: float  # amount
    # Purchase-side costs
    property_transfer_tax: float
    closing_legal_notary_fees: float
    total_closing_costs: float
    adjusted_cost_base: float
    # Sale
    sell_price: float
    realtor_fee_on_sale: float
    selling_legal_notary: float
    var_mortgage_termination: float
    total_selling_costs: float
    # Rental phase
    one_time_rent_realtor_fee: float
    maintenance_repairs_total: float
    strata_fee_total: float
    insurance_total: float
    property_tax_total: float
    gross_rental_income_total: float
    net_rental_income_total: float
    # Returns
    capital_gain: float
    net_capital_gain_after_tax: float
    invested_amount: float
    net_profit: float
    inflation_adjusted_net_profit: float
    roi_rate: float  # rate
    inflation_adjusted_roi_rate: float  # rate
    avg_yearly_roi_rate: float  # rate
    inflation_adjusted_avg_yearly_roi_rate: float  # rate

    # Ratio fields; shown as percentages by the display layer.
    RATE_FIELDS = (
        "roi_rate",
        "inflation_adjusted_roi_rate",
        "avg_yearly_roi_rate",
        "inflation_adjusted_avg_yearly_roi_rate",
    )

    @property
    def net_sale_proceeds(self) -> float:
        """Sale price less selling costs and the mortgage still owed."""
        return self.sell_price - self.total_selling_costs - self.remaining_principal

    def as_dict(self) -> dict:
        return asdict(self)
