import math

import pytest

from models import InvestmentParameters, InvestmentResults
from finance.fees import threshold_fee
from finance.mortgage import amortize
from analytics.projection import project


def test_reference_scenario_acquisition(example_params):
    res = project(example_params)

    assert res.total_purchase_price_with_gst == pytest.approx(525_000.0)
    assert res.downpayment == pytest.approx(105_000.0)
    assert res.mortgage_amount == pytest.approx(420_000.0)
    assert res.sell_price == pytest.approx(500_000.0 * 1.03**5)
    assert res.property_transfer_tax == pytest.approx(8_000.0)
    assert res.total_closing_costs == pytest.approx(9_200.0)
    assert res.adjusted_cost_base == pytest.approx(534_200.0)
    assert res.invested_amount == pytest.approx(114_200.0)


def test_reference_scenario_rental_phase(example_params):
    res = project(example_params)
    mortgage = amortize(420_000.0, 0.05, 25, 3)

    assert res.one_time_rent_realtor_fee == pytest.approx(900.0)
    assert res.maintenance_repairs_total == pytest.approx(2_880.0)
    assert res.strata_fee_total == pytest.approx(9_000.0)
    assert res.insurance_total == pytest.approx(1_440.0)
    assert res.property_tax_total == pytest.approx(7_500.0)
    assert res.gross_rental_income_total == pytest.approx(64_800.0)
    assert res.total_interest_paid == pytest.approx(mortgage.interest_paid)
    assert res.net_rental_income_total == pytest.approx(
        64_800.0 - (900.0 + 2_880.0 + 9_000.0 + 1_440.0 + 7_500.0 + mortgage.interest_paid)
    )
    assert res.principal_paid + res.remaining_principal == pytest.approx(420_000.0)


def test_reference_scenario_sale_and_returns(example_params):
    res = project(example_params)
    sell = 500_000.0 * 1.03**5
    payment = amortize(420_000.0, 0.05, 25, 3).monthly_payment

    assert res.realtor_fee_on_sale == pytest.approx(threshold_fee(sell, 100_000, 0.03, 0.025))
    assert res.var_mortgage_termination == pytest.approx(payment * 2 * 0.7)
    assert res.total_selling_costs == pytest.approx(
        res.realtor_fee_on_sale + 1_000.0 + res.var_mortgage_termination
    )

    gain = sell - res.total_selling_costs - 534_200.0
    assert res.capital_gain == pytest.approx(gain)
    assert res.net_capital_gain_after_tax == pytest.approx(gain - gain / 2 * 0.35)
    assert res.net_profit == pytest.approx(
        res.net_capital_gain_after_tax + res.net_rental_income_total
    )
    assert res.inflation_adjusted_net_profit == pytest.approx(res.net_profit / 1.02**5)
    assert res.roi_rate == pytest.approx(res.net_profit / 114_200.0)
    assert res.avg_yearly_roi_rate == pytest.approx((1 + res.roi_rate) ** (1 / 5) - 1)
    assert res.inflation_adjusted_avg_yearly_roi_rate == pytest.approx(
        (1 + res.inflation_adjusted_roi_rate) ** (1 / 5) - 1
    )


def test_appreciation_applies_to_pre_gst_price(example_params):
    res = project(example_params.replace(yearly_appreciation_rate=0.0))
    assert res.sell_price == pytest.approx(500_000.0)
    assert res.sell_price < res.total_purchase_price_with_gst


def test_development_years_do_not_accrue_holding_costs(example_params):
    base = project(example_params)
    longer = project(example_params.replace(development_years=10.0))
    assert longer.total_interest_paid == base.total_interest_paid
    assert longer.net_rental_income_total == base.net_rental_income_total
    assert longer.sell_price > base.sell_price


def test_rent_is_flat(example_params):
    res = project(example_params.replace(rent_years=10.0))
    assert res.gross_rental_income_total == pytest.approx(1_800.0 * 12 * 10)


def test_deterministic(example_params):
    assert project(example_params).as_dict() == project(example_params).as_dict()


def test_zero_horizon_annualized_rates_are_zero(example_params):
    res = project(example_params.replace(development_years=0.0, rent_years=0.0))
    assert res.avg_yearly_roi_rate == 0.0
    assert res.inflation_adjusted_avg_yearly_roi_rate == 0.0
    assert math.isfinite(res.roi_rate)


def test_zero_invested_amount_is_non_finite_not_an_error():
    res = project(InvestmentParameters())
    assert math.isnan(res.roi_rate)
    assert math.isnan(res.inflation_adjusted_roi_rate)
    # zero horizon keeps the annualized rates guarded
    assert res.avg_yearly_roi_rate == 0.0


def test_zero_amortization_term_propagates_non_finite(example_params):
    res = project(example_params.replace(amortization_years=0.0))
    assert math.isinf(res.monthly_payment)
    assert math.isinf(res.total_selling_costs)
    assert not math.isfinite(res.net_profit)
    assert not math.isfinite(res.roi_rate)


def test_heavy_loss_annualized_rate_is_nan(example_params):
    # ROI below -100% makes the fractional power undefined
    res = project(example_params.replace(yearly_appreciation_rate=-0.5))
    assert res.roi_rate < -1
    assert math.isnan(res.avg_yearly_roi_rate)


def test_downpayment_above_one_is_accepted(example_params):
    res = project(example_params.replace(downpayment_percent=1.2))
    assert res.mortgage_amount == pytest.approx(-105_000.0)


def test_result_fields_are_plain_floats(example_params):
    res = project(example_params)
    assert isinstance(res, InvestmentResults)
    assert all(type(v) is float for v in res.as_dict().values())


def test_unbounded_rental_phase_with_undefined_rate_terminates():
    params = InvestmentParameters.from_mapping(
        {
            "purchase_price_listing": 500_000.0,
            "amortization_years": 25.0,
            "rent_years": float("inf"),
            "mortgage_rate": float("nan"),
        }
    )
    res = project(params)
    assert math.isnan(res.total_interest_paid)
    assert not math.isfinite(res.net_profit)


def test_negative_amortization_term_flows_through(example_params):
    res = project(example_params.replace(amortization_years=-25.0))
    assert res.monthly_payment < 0
    assert res.principal_paid < 0
    assert res.remaining_principal > res.mortgage_amount
