"""Data models shared across ingestion modules."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, slots=True)
class CurrencyObservation:
    """Representation of a single ``Valute`` entry from a daily CBR document.

    ``value`` is kept exactly as published (comma decimal separator) and
    ``nominal`` stays as raw text when it is not an integer; the aggregation
    layer owns numeric normalisation so that a malformed field only drops
    this observation.
    """

    identity: str
    nominal: int | str
    value: str
    name: str | None = None
    num_code: str | None = None
    source_id: str | None = None


@dataclass(frozen=True, slots=True)
class Snapshot:
    """All observations published for one calendar date."""

    rate_date: date
    observations: tuple[CurrencyObservation, ...] = ()
    requested_date: date | None = None

    @property
    def is_empty(self) -> bool:
        return not self.observations

    @property
    def is_repeat(self) -> bool:
        """True when the feed answered with a document dated before the request."""

        return self.requested_date is not None and self.rate_date != self.requested_date


@dataclass(slots=True)
class SnapshotResult:
    """Outcome of fetching and parsing the snapshot for one requested date."""

    requested_date: date
    snapshot: Snapshot | None = None
    error: Exception | None = None
    stage: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.snapshot is not None

    @property
    def reason(self) -> str | None:
        if self.error is None:
            return None
        return f"{self.stage or 'unknown'}: {self.error}"


__all__ = ["CurrencyObservation", "Snapshot", "SnapshotResult"]
