import json
import math
import re
from numbers import Real
from typing import Mapping, Optional

from models import InvestmentParameters, InvestmentResults
from log import get_logger

logger = get_logger(__name__)

# Longest leading float literal, the way a browser's parseFloat reads form text
_LEADING_NUMBER = re.compile(
    r"^\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)


def _coerce(raw) -> Optional[float]:
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, Real):
        value = float(raw)
        return None if math.isnan(value) else value
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8", errors="replace")
    if not isinstance(raw, str):
        return None
    match = _LEADING_NUMBER.match(raw)
    if match is None:
        return None
    return float(match.group(1).replace("Infinity", "inf"))


def parse_number(raw) -> float:
    """Text (or number) to float; reads the leading number, anything unparsable becomes 0.0."""
    value = _coerce(raw)
    return 0.0 if value is None else value


def parse_parameters(source: Mapping) -> InvestmentParameters:
    """
    Pull every parameter field out of `source` (submitted form data, query args,
    a plain dict...) and build the numeric record the calculator expects.
    Anything else in `source`, such as the mode selector, is ignored.
    """
    values = {}
    for name in InvestmentParameters.field_names():
        raw = source.get(name)
        value = _coerce(raw)
        if value is None:
            logger.debug("field %s=%r not a number, using 0.0", name, raw)
            value = 0.0
        values[name] = value
    return InvestmentParameters.from_mapping(values)


def results_to_dict(res: InvestmentResults) -> dict:
    """Result record with non-finite numbers mapped to None (JSON null)."""
    return {
        name: (value if math.isfinite(value) else None)
        for name, value in res.as_dict().items()
    }


def results_to_json(res: InvestmentResults, indent=None) -> str:
    return json.dumps(results_to_dict(res), indent=indent)
