"""Abstractions for pluggable snapshot fetchers and parsers."""

from __future__ import annotations

from datetime import date
from typing import Protocol

from cbr_fx.ingestion.models import Snapshot


class SnapshotFetcher(Protocol):
    """Contract for retrieving the raw document published for one date.

    Implementations raise :class:`cbr_fx.errors.FetchError` on transport
    failures and never retry on their own.
    """

    def fetch(self, day: date) -> bytes:
        ...  # pragma: no cover - protocol definition


class SnapshotParser(Protocol):
    """Contract for turning a raw document into a :class:`Snapshot`.

    Document-level problems raise :class:`cbr_fx.errors.ParseError`.
    """

    def parse(self, raw: bytes, *, requested_date: date | None = None) -> Snapshot:
        ...  # pragma: no cover - protocol definition


__all__ = ["SnapshotFetcher", "SnapshotParser"]
