"""Fold daily snapshots into per-currency min/max/average statistics."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, MutableMapping

from cbr_fx.aggregation.accumulator import CurrencyAccumulator, CurrencySummary
from cbr_fx.aggregation.normalize import NormalizedObservation, normalize_observation
from cbr_fx.errors import ParseError
from cbr_fx.ingestion.models import CurrencyObservation, Snapshot


@dataclass(frozen=True, slots=True)
class RejectedObservation:
    rate_date: date
    observation: CurrencyObservation
    error: ParseError


@dataclass(slots=True)
class FoldResult:
    """What happened to one snapshot's observations during a fold."""

    rate_date: date
    folded: int = 0
    created: int = 0
    rejected: list[RejectedObservation] = field(default_factory=list)


def _valid_observations(snapshot: Snapshot, result: FoldResult) -> Dict[str, NormalizedObservation]:
    """Normalize a snapshot, keyed by identity; the last valid duplicate wins."""

    by_identity: Dict[str, NormalizedObservation] = {}
    for observation in snapshot.observations:
        try:
            normalized = normalize_observation(observation)
        except ParseError as exc:
            result.rejected.append(RejectedObservation(snapshot.rate_date, observation, exc))
            continue
        by_identity[normalized.identity] = normalized
    return by_identity


def fold_snapshot(
    accumulators: MutableMapping[str, CurrencyAccumulator],
    snapshot: Snapshot,
) -> FoldResult:
    """Fold ``snapshot`` into ``accumulators`` in place.

    Observations are matched to accumulators by currency identity, so a
    snapshot may carry currencies in any order, drop some or introduce new ones.
    Invalid observations are reported in the returned :class:`FoldResult`
    and leave every accumulator untouched.
    """

    result = FoldResult(rate_date=snapshot.rate_date)
    for identity, observation in _valid_observations(snapshot, result).items():
        accumulator = accumulators.get(identity)
        if accumulator is None:
            accumulators[identity] = CurrencyAccumulator.seed(observation, snapshot.rate_date)
            result.created += 1
        else:
            accumulator.update(observation, snapshot.rate_date)
        result.folded += 1
    return result


def summarise(accumulators: Mapping[str, CurrencyAccumulator]) -> Mapping[str, CurrencySummary]:
    return MappingProxyType(
        {identity: accumulators[identity].summary() for identity in sorted(accumulators)}
    )


class AggregationEngine:
    """Owns the accumulator mapping for a single window run.

    Snapshots must be folded newest first: the fold order decides which date
    is reported for a tied extremum.
    """

    def __init__(self, accumulators: MutableMapping[str, CurrencyAccumulator] | None = None) -> None:
        self._accumulators: MutableMapping[str, CurrencyAccumulator] = (
            accumulators if accumulators is not None else {}
        )
        self._folded_dates: list[date] = []

    def fold(self, snapshot: Snapshot) -> FoldResult:
        result = fold_snapshot(self._accumulators, snapshot)
        self._folded_dates.append(snapshot.rate_date)
        return result

    def fold_all(self, snapshots: Iterable[Snapshot]) -> list[FoldResult]:
        return [self.fold(snapshot) for snapshot in snapshots]

    def has_folded(self, rate_date: date) -> bool:
        return rate_date in self._folded_dates

    def results(self) -> Mapping[str, CurrencySummary]:
        """Return immutable per-currency summaries sorted by identity."""

        return summarise(self._accumulators)

    def __len__(self) -> int:
        return len(self._accumulators)

    def __contains__(self, identity: object) -> bool:
        return identity in self._accumulators


__all__ = [
    "AggregationEngine",
    "FoldResult",
    "RejectedObservation",
    "fold_snapshot",
    "summarise",
]
