import numpy as np

from models import InvestmentParameters, InvestmentResults
from finance.fees import threshold_fee
from finance.mortgage import amortize

# Early-termination penalty heuristic: 2 monthly payments, discounted to 70%
TERMINATION_PAYMENTS = 2
TERMINATION_FACTOR = 0.7

# Fraction of a capital gain that is taxable
CAPITAL_GAIN_INCLUSION = 0.5

# One-time rental listing fee, as a fraction of one month's starting rent
RENT_LISTING_FEE_MONTHS = 0.5


def project(params: InvestmentParameters) -> InvestmentResults:
    """Full cost / income / return breakdown of a buy, develop, rent, sell plan.

    Pure and deterministic. Bad inputs are not rejected: a zero invested
    amount or a zero amortization term yields inf/NaN in the affected fields.
    """
    p = {name: np.float64(value) for name, value in params.as_dict().items()}

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        # 1. Acquisition
        price = p["purchase_price_listing"]
        gst_on_purchase = price * p["gst_rate"]
        total_price_with_gst = price + gst_on_purchase
        downpayment = total_price_with_gst * p["downpayment_percent"]
        mortgage_amount = total_price_with_gst - downpayment

        # 2. Horizon
        rent_years = p["rent_years"]
        total_years = p["development_years"] + rent_years

        # 3. Sale price; appreciation runs on the pre-GST listing price
        sell_price = price * (1 + p["yearly_appreciation_rate"]) ** total_years

        # 4. Purchase-side costs
        property_transfer_tax = threshold_fee(
            price,
            p["property_transfer_tax_rate_threshold"],
            p["property_transfer_tax_rate_until_threshold"],
            p["property_transfer_tax_rate_above_threshold"],
        )
        total_closing_costs = property_transfer_tax + p["closing_legal_notary_fees"]
        adjusted_cost_base = total_price_with_gst + total_closing_costs

        # 5. Financing; the loan is only serviced during the rental phase
        mortgage = amortize(
            mortgage_amount, p["mortgage_rate"], p["amortization_years"], rent_years
        )
        monthly_payment = np.float64(mortgage.monthly_payment)
        interest_paid = np.float64(mortgage.interest_paid)
        principal_paid = np.float64(mortgage.principal_repaid)
        remaining_principal = mortgage_amount - principal_paid

        # 6. Sale-side costs
        realtor_fee_on_sale = threshold_fee(
            sell_price,
            p["realtor_fee_rate_threshold"],
            p["realtor_fee_rate_until_threshold"],
            p["realtor_fee_rate_above_threshold"],
        )
        selling_legal_notary = p["selling_legal_notary_fees"]
        var_mortgage_termination = monthly_payment * TERMINATION_PAYMENTS * TERMINATION_FACTOR
        total_selling_costs = realtor_fee_on_sale + selling_legal_notary + var_mortgage_termination

        # 7. Holding costs, rental phase only
        rent = p["starting_rent_per_month"]
        one_time_rent_realtor_fee = rent * RENT_LISTING_FEE_MONTHS
        maintenance_repairs_total = p["maintenance_repairs_monthly"] * 12 * rent_years
        strata_fee_total = p["strata_fee_monthly"] * 12 * rent_years
        insurance_total = p["insurance_monthly"] * 12 * rent_years
        property_tax_total = p["property_tax_yearly"] * rent_years

        # 8. Rental income; rent is held flat
        gross_rental_income_total = rent * 12 * rent_years
        owning_costs_during_rent = (
            one_time_rent_realtor_fee
            + maintenance_repairs_total
            + strata_fee_total
            + insurance_total
            + interest_paid
            + property_tax_total
        )
        net_rental_income_total = gross_rental_income_total - owning_costs_during_rent

        # 9. Capital gain
        capital_gain = sell_price - total_selling_costs - adjusted_cost_base
        net_capital_gain_after_tax = (
            capital_gain - capital_gain * CAPITAL_GAIN_INCLUSION * p["marginal_tax_rate"]
        )

        # 10. Investment return
        invested_amount = downpayment + total_closing_costs
        net_profit = net_capital_gain_after_tax + net_rental_income_total
        inflation_factor = (1 + p["inflation_rate"]) ** total_years
        inflation_adjusted_net_profit = net_profit / inflation_factor

        # 11. Return rates
        roi_rate = net_profit / invested_amount
        inflation_adjusted_roi_rate = inflation_adjusted_net_profit / invested_amount
        avg_yearly_roi_rate = np.float64(0.0)
        inflation_adjusted_avg_yearly_roi_rate = np.float64(0.0)
        if total_years > 0:
            avg_yearly_roi_rate = (1 + roi_rate) ** (1 / total_years) - 1
            inflation_adjusted_avg_yearly_roi_rate = (
                (1 + inflation_adjusted_roi_rate) ** (1 / total_years) - 1
            )

    return InvestmentResults(
        purchase_price_listing=float(price),
        total_purchase_price_with_gst=float(total_price_with_gst),
        downpayment=float(downpayment),
        mortgage_amount=float(mortgage_amount),
        monthly_payment=float(monthly_payment),
        total_interest_paid=float(interest_paid),
        principal_paid=float(principal_paid),
        remaining_principal=float(remaining_principal),
        property_transfer_tax=float(property_transfer_tax),
        closing_legal_notary_fees=float(p["closing_legal_notary_fees"]),
        total_closing_costs=float(total_closing_costs),
        adjusted_cost_base=float(adjusted_cost_base),
        sell_price=float(sell_price),
        realtor_fee_on_sale=float(realtor_fee_on_sale),
        selling_legal_notary=float(selling_legal_notary),
        var_mortgage_termination=float(var_mortgage_termination),
        total_selling_costs=float(total_selling_costs),
        one_time_rent_realtor_fee=float(one_time_rent_realtor_fee),
        maintenance_repairs_total=float(maintenance_repairs_total),
        strata_fee_total=float(strata_fee_total),
        insurance_total=float(insurance_total),
        property_tax_total=float(property_tax_total),
        gross_rental_income_total=float(gross_rental_income_total),
        net_rental_income_total=float(net_rental_income_total),
        capital_gain=float(capital_gain),
        net_capital_gain_after_tax=float(net_capital_gain_after_tax),
        invested_amount=float(invested_amount),
        net_profit=float(net_profit),
        inflation_adjusted_net_profit=float(inflation_adjusted_net_profit),
        roi_rate=float(roi_rate),
        inflation_adjusted_roi_rate=float(inflation_adjusted_roi_rate),
        avg_yearly_roi_rate=float(avg_yearly_roi_rate),
        inflation_adjusted_avg_yearly_roi_rate=float(inflation_adjusted_avg_yearly_roi_rate),
    )
