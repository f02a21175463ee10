from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Form defaults of the calculator (rates are ratios, not percentages)
DEFAULT_VALUES = {
    "purchase_price_listing": 500000.0,
    "gst_rate": 0.05,
    "downpayment_percent": 0.20,
    "mortgage_rate": 0.05,
    "amortization_years": 25.0,
    "development_years": 2.0,
    "rent_years": 3.0,
    "yearly_appreciation_rate": 0.03,
    "inflation_rate": 0.02,
    "marginal_tax_rate": 0.35,
    "realtor_fee_rate_threshold": 100000.0,
    "realtor_fee_rate_until_threshold": 0.03,
    "realtor_fee_rate_above_threshold": 0.025,
    "property_transfer_tax_rate_threshold": 200000.0,
    "property_transfer_tax_rate_until_threshold": 0.01,
    "property_transfer_tax_rate_above_threshold": 0.02,
    "starting_rent_per_month": 1800.0,
    "closing_legal_notary_fees": 1200.0,
    "selling_legal_notary_fees": 1000.0,
    "maintenance_repairs_monthly": 80.0,
    "strata_fee_monthly": 250.0,
    "insurance_monthly": 40.0,
    "property_tax_yearly": 2500.0,
}

FIELD_LABELS = {
    "purchase_price_listing": "Purchase Price Listing",
    "gst_rate": "GST Rate (decimal)",
    "downpayment_percent": "Downpayment % (decimal)",
    "mortgage_rate": "Mortgage Rate (decimal)",
    "amortization_years": "Amortization (years)",
    "development_years": "Development Phase (years)",
    "rent_years": "Rental Phase (years)",
    "yearly_appreciation_rate": "Yearly Appreciation Rate (decimal)",
    "inflation_rate": "Inflation Rate (decimal)",
    "marginal_tax_rate": "Marginal Tax Rate (decimal)",
    "realtor_fee_rate_threshold": "Realtor Fee Rate Threshold",
    "realtor_fee_rate_until_threshold": "Realtor Fee Rate Until Threshold (decimal)",
    "realtor_fee_rate_above_threshold": "Realtor Fee Rate Above Threshold (decimal)",
    "property_transfer_tax_rate_threshold": "Property Transfer Tax Rate Threshold",
    "property_transfer_tax_rate_until_threshold": "Property Transfer Tax Rate Until Threshold (decimal)",
    "property_transfer_tax_rate_above_threshold": "Property Transfer Tax Rate Above Threshold (decimal)",
    "starting_rent_per_month": "Starting Rent per Month",
    "closing_legal_notary_fees": "Closing Legal/Notary Fees",
    "selling_legal_notary_fees": "Selling Legal/Notary Fees",
    "maintenance_repairs_monthly": "Maintenance/Repairs (monthly)",
    "strata_fee_monthly": "Strata Fee (monthly)",
    "insurance_monthly": "Insurance (monthly)",
    "property_tax_yearly": "Property Tax (yearly)",
}

# Left/right column split of the input form
FORM_COLUMNS = (
    [
        "purchase_price_listing",
        "gst_rate",
        "downpayment_percent",
        "mortgage_rate",
        "amortization_years",
        "development_years",
        "rent_years",
        "yearly_appreciation_rate",
        "inflation_rate",
        "marginal_tax_rate",
        "realtor_fee_rate_threshold",
        "realtor_fee_rate_until_threshold",
        "realtor_fee_rate_above_threshold",
        "property_transfer_tax_rate_threshold",
        "property_transfer_tax_rate_until_threshold",
        "property_transfer_tax_rate_above_threshold",
    ],
    [
        "starting_rent_per_month",
        "closing_legal_notary_fees",
        "selling_legal_notary_fees",
        "maintenance_repairs_monthly",
        "strata_fee_monthly",
        "insurance_monthly",
        "property_tax_yearly",
    ],
)

MODES = ["Investment Property", "Primary Residence"]


class AppSettings(BaseSettings):
    LOG_LEVEL: str = Field(default="INFO")
    MAX_HORIZON_YEARS: int = Field(default=25)

    model_config = SettingsConfigDict(
        env_prefix="INVESTMENT_CALC_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _upper_level(cls, v: Any) -> Any:
        return v.strip().upper() if isinstance(v, str) else v


settings = AppSettings()
