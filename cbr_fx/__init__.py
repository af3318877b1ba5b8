"""Public interface for the cbr_fx package."""

from __future__ import annotations

from datetime import date
from importlib import metadata as importlib_metadata
from typing import Any

from cbr_fx.aggregation import AggregationEngine, CurrencySummary
from cbr_fx.errors import CbrFxError, FetchError, InvalidNominalError, ParseError
from cbr_fx.ingestion.cbr_xml import CBRXMLParser
from cbr_fx.ingestion.strategy import SnapshotFetcher, SnapshotParser
from cbr_fx.utils.cbr import DEFAULT_TIMEOUT, DEFAULT_WINDOW_DAYS
from cbr_fx.window import WindowRunResult, summarise_window

__all__ = [
    "__version__",
    "AggregationEngine",
    "CbrFx",
    "CbrFxError",
    "CurrencySummary",
    "FetchError",
    "InvalidNominalError",
    "ParseError",
    "WindowRunResult",
    "CBRRequestsClient",
]

try:
    __version__ = importlib_metadata.version("cbr-fx")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"


class CbrFx:
    """Package facade that runs a rolling-window summary against the CBR feed."""

    __slots__ = ("days", "timeout", "skip_repeated", "_fetcher", "_parser")

    __version__ = __version__

    def __init__(
        self,
        days: int = DEFAULT_WINDOW_DAYS,
        *,
        timeout: int | float = DEFAULT_TIMEOUT,
        skip_repeated: bool = False,
        fetcher: SnapshotFetcher | None = None,
        parser: SnapshotParser | None = None,
    ) -> None:
        """Configure the window.

        ``fetcher`` and ``parser`` default to :class:`CBRRequestsClient` and
        :class:`CBRXMLParser`; tests and alternative sources can inject their own.
        """

        if isinstance(days, bool) or not isinstance(days, int) or days <= 0:
            raise ValueError("days must be a positive integer")
        self.days = days
        self.timeout = timeout
        self.skip_repeated = skip_repeated
        self._fetcher = fetcher
        self._parser = parser or CBRXMLParser()

    def summary(self, end_date: date | None = None, *, strict: bool = False) -> WindowRunResult:
        """Aggregate the window ending at ``end_date`` (today by default)."""

        if self._fetcher is not None:
            return self._run(self._fetcher, end_date, strict)

        from cbr_fx.ingestion.cbr_requests import CBRRequestsClient

        with CBRRequestsClient(timeout=self.timeout) as client:
            return self._run(client, end_date, strict)

    def _run(self, fetcher: SnapshotFetcher, end_date: date | None, strict: bool) -> WindowRunResult:
        return summarise_window(
            fetcher,
            self._parser,
            end=end_date,
            days=self.days,
            skip_repeated=self.skip_repeated,
            strict=strict,
        )


def __getattr__(name: str) -> Any:
    """Lazily import the HTTP client so ``requests`` loads only when needed."""

    if name == "CBRRequestsClient":
        from cbr_fx.ingestion.cbr_requests import CBRRequestsClient as _client

        return _client
    raise AttributeError(f"module 'cbr_fx' has no attribute {name}")
