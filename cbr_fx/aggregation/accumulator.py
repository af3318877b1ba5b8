"""Running extremum and average state for one currency."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from cbr_fx.aggregation.normalize import NormalizedObservation


@dataclass(frozen=True, slots=True)
class CurrencySummary:
    """Read-only view of an accumulator handed to reporters, in floats."""

    identity: str
    name: str | None
    max_unit_rate: float
    max_date: date
    min_unit_rate: float
    min_date: date
    average: float
    observation_count: int


@dataclass(slots=True)
class CurrencyAccumulator:
    """Mutable per-currency state owned by the aggregation engine.

    ``sum_inverse_unit_rate`` adds up ``nominal / value`` so that
    :attr:`average` is the mean amount of foreign currency per domestic unit.
    """

    identity: str
    max_unit_rate: Decimal
    max_date: date
    min_unit_rate: Decimal
    min_date: date
    sum_inverse_unit_rate: Decimal
    observation_count: int = 1
    name: str | None = None

    @classmethod
    def seed(cls, observation: NormalizedObservation, rate_date: date) -> "CurrencyAccumulator":
        rate = observation.unit_rate
        return cls(
            identity=observation.identity,
            max_unit_rate=rate,
            max_date=rate_date,
            min_unit_rate=rate,
            min_date=rate_date,
            sum_inverse_unit_rate=observation.inverse_unit_rate,
            name=observation.name,
        )

    def update(self, observation: NormalizedObservation, rate_date: date) -> None:
        if observation.identity != self.identity:
            raise ValueError(
                f"Observation for {observation.identity} folded into {self.identity} accumulator"
            )
        rate = observation.unit_rate
        # Ties keep the earlier-folded date.
        if rate > self.max_unit_rate:
            self.max_unit_rate = rate
            self.max_date = rate_date
        elif rate < self.min_unit_rate:
            self.min_unit_rate = rate
            self.min_date = rate_date
        self.sum_inverse_unit_rate += observation.inverse_unit_rate
        self.observation_count += 1
        if self.name is None:
            self.name = observation.name

    @property
    def average(self) -> Decimal:
        return self.sum_inverse_unit_rate / self.observation_count

    def summary(self) -> CurrencySummary:
        return CurrencySummary(
            identity=self.identity,
            name=self.name,
            max_unit_rate=float(self.max_unit_rate),
            max_date=self.max_date,
            min_unit_rate=float(self.min_unit_rate),
            min_date=self.min_date,
            average=float(self.average),
            observation_count=self.observation_count,
        )


__all__ = ["CurrencyAccumulator", "CurrencySummary"]
