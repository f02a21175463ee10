# tests/conftest.py
import pytest

from config import DEFAULT_VALUES
from models import InvestmentParameters


@pytest.fixture
def example_params():
    # The form defaults double as the reference scenario
    return InvestmentParameters.from_mapping(DEFAULT_VALUES)
