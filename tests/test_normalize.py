from __future__ import annotations

from decimal import Decimal

import pytest

from cbr_fx.aggregation.normalize import (
    normalize_observation,
    parse_nominal,
    parse_quoted_value,
    unit_rate,
)
from cbr_fx.errors import InvalidNominalError, ParseError
from cbr_fx.ingestion.models import CurrencyObservation


def test_parse_quoted_value_accepts_comma_decimal() -> None:
    assert parse_quoted_value("90,5000") == Decimal("90.5")
    assert parse_quoted_value(" 1 234,5 ") == Decimal("1234.5")
    assert parse_quoted_value("95.50") == Decimal("95.5")


@pytest.mark.parametrize("raw", ["", "abc", "1,2,3", "0", "0,0000", "-1,5", "nan", "inf"])
def test_parse_quoted_value_rejects_bad_values(raw: str) -> None:
    with pytest.raises(ParseError):
        parse_quoted_value(raw)


def test_normalize_divides_by_nominal() -> None:
    observation = CurrencyObservation(identity="JPY", nominal=100, value="61,2345", name="Yen")

    normalized = normalize_observation(observation)

    assert normalized.unit_rate == Decimal("0.612345")
    assert normalized.inverse_unit_rate == Decimal(100) / Decimal("61.2345")
    assert normalized.name == "Yen"


@pytest.mark.parametrize(
    "scaled, unit",
    [
        (("905,00", 10), ("90,50", 1)),
        (("1,0030", 10), ("0,1003", 1)),
        (("1,0050", 10), ("0,1005", 1)),
        (("61,2345", 100), ("0,612345", 1)),
        (("34,5678", 10000), ("3,456780", 1000)),
    ],
)
def test_nominal_change_normalizes_to_same_unit_rate(scaled, unit) -> None:
    assert unit_rate(*scaled) == unit_rate(*unit)


@pytest.mark.parametrize("nominal", [0, -1, "0", "-10"])
def test_normalize_rejects_non_positive_nominal(nominal) -> None:
    observation = CurrencyObservation(identity="USD", nominal=nominal, value="90,00")

    with pytest.raises(InvalidNominalError):
        normalize_observation(observation)
    with pytest.raises(InvalidNominalError):
        unit_rate("90,00", nominal)


@pytest.mark.parametrize("nominal", ["", "ten", "1,5", True])
def test_normalize_rejects_malformed_nominal(nominal) -> None:
    observation = CurrencyObservation(identity="HUF", nominal=nominal, value="25,00")

    with pytest.raises(ParseError, match="HUF"):
        normalize_observation(observation)


def test_parse_nominal_accepts_integer_text() -> None:
    assert parse_nominal("100") == 100
    assert parse_nominal("10 000") == 10000
    assert parse_nominal(1) == 1


def test_invalid_nominal_is_a_parse_error() -> None:
    assert issubclass(InvalidNominalError, ParseError)
