"""Render window summaries as tables or CSV files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Mapping

import pandas as pd

from cbr_fx.aggregation import CurrencySummary

COLUMNS = (
    "currency",
    "max",
    "max_date",
    "min",
    "min_date",
    "avg_per_rub",
    "observations",
)
NO_DATA_MESSAGE = "No exchange-rate data was collected for the requested window."


def summary_frame(
    results: Mapping[str, CurrencySummary],
    currencies: Iterable[str] | None = None,
) -> pd.DataFrame:
    """Return one row per currency, optionally restricted to ``currencies``."""

    wanted = {code.upper() for code in currencies} if currencies else None
    rows = [
        {
            "currency": summary.identity,
            "max": summary.max_unit_rate,
            "max_date": summary.max_date,
            "min": summary.min_unit_rate,
            "min_date": summary.min_date,
            "avg_per_rub": summary.average,
            "observations": summary.observation_count,
        }
        for identity, summary in results.items()
        if wanted is None or identity in wanted
    ]
    return pd.DataFrame(rows, columns=list(COLUMNS))


def render_table(
    results: Mapping[str, CurrencySummary],
    currencies: Iterable[str] | None = None,
) -> str:
    frame = summary_frame(results, currencies)
    if frame.empty:
        return NO_DATA_MESSAGE
    return frame.to_string(index=False, float_format=lambda value: f"{value:.4f}")


def write_csv(
    results: Mapping[str, CurrencySummary],
    path: str | Path,
    currencies: Iterable[str] | None = None,
) -> Path:
    """Write the summary table to ``path`` (header only when there is no data)."""

    csv_path = Path(path)
    csv_path.parent.mkdir(parents=True, exist_ok=True)
    frame = summary_frame(results, currencies)
    frame.to_csv(csv_path, index=False, float_format="%.6f")
    return csv_path


__all__ = ["COLUMNS", "NO_DATA_MESSAGE", "render_table", "summary_frame", "write_csv"]
