"""Turn published quotes into per-unit rates."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from cbr_fx.errors import InvalidNominalError, ParseError
from cbr_fx.ingestion.models import CurrencyObservation


@dataclass(frozen=True, slots=True)
class NormalizedObservation:
    """Quote in exact decimal form, so a nominal change never breaks a tie."""

    identity: str
    nominal: int
    quoted_value: Decimal
    name: str | None = None

    @property
    def unit_rate(self) -> Decimal:
        """Domestic-currency cost of one unit of the foreign currency."""

        return self.quoted_value / self.nominal

    @property
    def inverse_unit_rate(self) -> Decimal:
        """Units of foreign currency bought by one unit of domestic currency."""

        return self.nominal / self.quoted_value


def parse_quoted_value(raw: str) -> Decimal:
    """Parse a comma-decimal quote such as ``"90,5000"``."""

    cleaned = (raw or "").strip().replace("\xa0", "").replace(" ", "").replace(",", ".")
    try:
        value = Decimal(cleaned)
    except InvalidOperation as exc:
        raise ParseError(f"Malformed quoted value {raw!r}") from exc
    if not value.is_finite() or value <= 0:
        raise ParseError(f"Quoted value must be a positive number, got {raw!r}")
    return value


def parse_nominal(raw: int | str, identity: str = "") -> int:
    """Return ``raw`` as a positive integer nominal."""

    prefix = f"{identity}: " if identity else ""
    if isinstance(raw, bool):
        raise ParseError(f"{prefix}malformed nominal {raw!r}")
    if isinstance(raw, int):
        nominal = raw
    else:
        try:
            nominal = int(str(raw).replace("\xa0", "").replace(" ", ""))
        except ValueError as exc:
            raise ParseError(f"{prefix}malformed nominal {raw!r}") from exc
    if nominal <= 0:
        raise InvalidNominalError(f"{prefix}nominal must be positive, got {nominal}")
    return nominal


def normalize_observation(observation: CurrencyObservation) -> NormalizedObservation:
    return NormalizedObservation(
        identity=observation.identity,
        nominal=parse_nominal(observation.nominal, observation.identity),
        quoted_value=parse_quoted_value(observation.value),
        name=observation.name,
    )


def unit_rate(value: str, nominal: int | str) -> Decimal:
    """Shortcut for ``parse_quoted_value(value) / nominal`` with validation."""

    return parse_quoted_value(value) / parse_nominal(nominal)


__all__ = [
    "NormalizedObservation",
    "normalize_observation",
    "parse_nominal",
    "parse_quoted_value",
    "unit_rate",
]
