"""Drive the fetch → parse → fold loop over a rolling date window."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Mapping

from cbr_fx.aggregation import AggregationEngine, CurrencySummary
from cbr_fx.errors import FetchError, ParseError
from cbr_fx.ingestion.models import SnapshotResult
from cbr_fx.ingestion.strategy import SnapshotFetcher, SnapshotParser
from cbr_fx.utils.cbr import DEFAULT_WINDOW_DAYS
from cbr_fx.utils.date_range import window_dates
from cbr_fx.utils.logger import get_logger

LOGGER = get_logger(__name__)

__all__ = ["WindowRunResult", "collect_snapshot", "summarise_window"]


@dataclass(slots=True)
class WindowRunResult:
    """Outcome of one window run: final summaries plus per-date bookkeeping."""

    results: Mapping[str, CurrencySummary] = field(default_factory=dict)
    processed: list[date] = field(default_factory=list)
    skipped: list[SnapshotResult] = field(default_factory=list)
    repeated: list[date] = field(default_factory=list)
    rejected_observations: int = 0

    @property
    def total(self) -> int:
        return len(self.processed) + len(self.skipped) + len(self.repeated)

    @property
    def is_empty(self) -> bool:
        return not self.results


def collect_snapshot(
    fetcher: SnapshotFetcher,
    parser: SnapshotParser,
    day: date,
) -> SnapshotResult:
    """Fetch and parse ``day`` without raising on expected per-date failures."""

    try:
        raw = fetcher.fetch(day)
    except FetchError as exc:
        return SnapshotResult(requested_date=day, error=exc, stage="fetch")
    try:
        snapshot = parser.parse(raw, requested_date=day)
    except ParseError as exc:
        return SnapshotResult(requested_date=day, error=exc, stage="parse")
    return SnapshotResult(requested_date=day, snapshot=snapshot)


def summarise_window(
    fetcher: SnapshotFetcher,
    parser: SnapshotParser,
    *,
    end: date | None = None,
    days: int = DEFAULT_WINDOW_DAYS,
    engine: AggregationEngine | None = None,
    skip_repeated: bool = False,
    strict: bool = False,
) -> WindowRunResult:
    """Aggregate ``days`` daily snapshots ending at ``end`` (newest first).

    Failed dates are logged and skipped unless ``strict`` is set, in which case
    the first failure is re-raised. With ``skip_repeated`` a snapshot whose
    published date was already folded (the feed repeats the last business
    day on weekends and holidays) is ignored instead of counted again.
    """

    engine = engine if engine is not None else AggregationEngine()
    run = WindowRunResult()
    for day in window_dates(end, days):
        outcome = collect_snapshot(fetcher, parser, day)
        if not outcome.ok:
            if strict and outcome.error is not None:
                raise outcome.error
            LOGGER.warning("Skipping %s (%s)", day, outcome.reason)
            run.skipped.append(outcome)
            continue

        snapshot = outcome.snapshot
        assert snapshot is not None  # for type checkers
        if skip_repeated and engine.has_folded(snapshot.rate_date):
            LOGGER.info("Skipping %s: feed repeated %s", day, snapshot.rate_date)
            run.repeated.append(day)
            continue

        fold = engine.fold(snapshot)
        for rejected in fold.rejected:
            LOGGER.warning(
                "Ignoring %s on %s: %s",
                rejected.observation.identity,
                rejected.rate_date,
                rejected.error,
            )
        run.rejected_observations += len(fold.rejected)
        run.processed.append(day)
        LOGGER.info(
            "Processed %s (published %s): %s currencies folded, %s new",
            day,
            snapshot.rate_date,
            fold.folded,
            fold.created,
        )

    run.results = engine.results()
    LOGGER.info(
        "Window finished: %s dates processed, %s skipped, %s repeated, %s currencies",
        len(run.processed),
        len(run.skipped),
        len(run.repeated),
        len(run.results),
    )
    return run
