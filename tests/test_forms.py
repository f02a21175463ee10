import json
import logging

import pytest

from config import DEFAULT_VALUES
from models import InvestmentParameters
from analytics.projection import project
import forms
from forms import parse_number, parse_parameters, results_to_dict, results_to_json


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("500000", 500_000.0),
        (" 0.05 ", 0.05),
        ("1e3", 1_000.0),
        ("-2", -2.0),
        (b"25", 25.0),
        (3, 3.0),
        ("", 0.0),
        ("   ", 0.0),
        (None, 0.0),
        ("abc", 0.0),
        ("5%", 5.0),
        ("25%", 25.0),
        ("1,000", 1.0),
        ("12abc", 12.0),
        ("1_000", 1.0),
        (".5", 0.5),
        ("1.", 1.0),
        ("2e", 2.0),
        ("Infinity", float("inf")),
        ("-Infinity", float("-inf")),
        ("inf", 0.0),
        ("nan", 0.0),
        ("$100", 0.0),
        ("e5", 0.0),
        (float("nan"), 0.0),
        (True, 0.0),
        ([1], 0.0),
    ],
)
def test_parse_number(raw, expected):
    assert parse_number(raw) == expected


def test_missing_and_bad_fields_default_to_zero():
    params = parse_parameters({"purchase_price_listing": "500000", "gst_rate": "five"})
    assert params.purchase_price_listing == 500_000.0
    assert params.gst_rate == 0.0
    assert params.rent_years == 0.0


def test_form_text_matches_numeric_record():
    form = {name: str(value) for name, value in DEFAULT_VALUES.items()}
    assert parse_parameters(form) == InvestmentParameters.from_mapping(DEFAULT_VALUES)


def test_mode_field_does_not_change_results():
    form = {name: str(value) for name, value in DEFAULT_VALUES.items()}
    investment = project(parse_parameters({**form, "mode": "investment"}))
    primary = project(parse_parameters({**form, "mode": "primary"}))
    assert investment.as_dict() == primary.as_dict()


def test_from_mapping_rejects_text():
    with pytest.raises(TypeError):
        InvestmentParameters.from_mapping({"gst_rate": "0.05"})


def test_non_finite_results_serialize_as_null():
    res = project(InvestmentParameters())
    data = json.loads(results_to_json(res))
    assert data["roi_rate"] is None
    assert data["avg_yearly_roi_rate"] == 0.0
    assert set(data) == set(res.as_dict())


def test_finite_results_round_trip(example_params):
    res = project(example_params)
    assert json.loads(results_to_json(res)) == results_to_dict(res) == res.as_dict()


def test_each_fallback_field_is_logged(caplog):
    caplog.set_level(logging.DEBUG, logger=forms.logger.name)
    forms.logger.addHandler(caplog.handler)
    try:
        parse_parameters({"purchase_price_listing": "500000", "gst_rate": "five"})
    finally:
        forms.logger.removeHandler(caplog.handler)

    fallbacks = [r for r in caplog.records if r.levelno == logging.DEBUG]
    assert len(fallbacks) == len(InvestmentParameters.field_names()) - 1
    messages = [r.getMessage() for r in fallbacks]
    assert any("gst_rate" in m for m in messages)
    assert not any("purchase_price_listing" in m for m in messages)


def test_leading_number_is_kept_from_form_text():
    params = parse_parameters({"downpayment_percent": "0.2 (20%)", "rent_years": "3 years"})
    assert params.downpayment_percent == 0.2
    assert params.rent_years == 3.0
