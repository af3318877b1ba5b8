"""Aggregation of daily snapshots into per-currency statistics."""

from __future__ import annotations

from cbr_fx.aggregation.accumulator import CurrencyAccumulator, CurrencySummary
from cbr_fx.aggregation.engine import (
    AggregationEngine,
    FoldResult,
    RejectedObservation,
    fold_snapshot,
    summarise,
)
from cbr_fx.aggregation.normalize import (
    NormalizedObservation,
    normalize_observation,
    parse_quoted_value,
    unit_rate,
)

__all__ = [
    "AggregationEngine",
    "CurrencyAccumulator",
    "CurrencySummary",
    "FoldResult",
    "NormalizedObservation",
    "RejectedObservation",
    "fold_snapshot",
    "normalize_observation",
    "parse_quoted_value",
    "summarise",
    "unit_rate",
]
