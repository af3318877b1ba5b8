"""Tests for the public package facade and CLI."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

import cbr_fx
from cbr_fx import CbrFx, FetchError, __version__
from cbr_fx.report import NO_DATA_MESSAGE
from cbr_fx.scripts import window_summary

END = date(2024, 3, 15)


def _document(day: date, usd: str) -> bytes:
    return (
        '<?xml version="1.0" encoding="windows-1251"?>'
        f'<ValCurs Date="{day:%d.%m.%Y}" name="Foreign Currency Market">'
        '<Valute ID="R01235"><NumCode>840</NumCode><CharCode>USD</CharCode>'
        f"<Nominal>1</Nominal><Name>Доллар США</Name><Value>{usd}</Value></Valute>"
        "</ValCurs>"
    ).encode("windows-1251")


class _DocumentFetcher:
    def __init__(self, documents: dict[date, bytes]) -> None:
        self.documents = documents

    def fetch(self, day: date) -> bytes:
        if day not in self.documents:
            raise FetchError(f"nothing published for {day}")
        return self.documents[day]

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False


def test_cbr_fx_class_is_exposed() -> None:
    assert CbrFx.__version__ == __version__


def test_lazy_client_attribute() -> None:
    from cbr_fx.ingestion.cbr_requests import CBRRequestsClient

    assert cbr_fx.CBRRequestsClient is CBRRequestsClient
    with pytest.raises(AttributeError):
        cbr_fx.does_not_exist  # noqa: B018


@pytest.mark.parametrize("days", [0, -1, True, 2.5])
def test_cbr_fx_validates_days(days) -> None:
    with pytest.raises(ValueError):
        CbrFx(days)


def test_summary_with_injected_fetcher() -> None:
    fetcher = _DocumentFetcher(
        {
            END: _document(END, "90,0000"),
            END - timedelta(days=1): _document(END - timedelta(days=1), "95,5000"),
            END - timedelta(days=2): _document(END - timedelta(days=2), "88,2500"),
        }
    )

    run = CbrFx(3, fetcher=fetcher).summary(END)

    usd = run.results["USD"]
    assert usd.name == "Доллар США"
    assert usd.max_unit_rate == pytest.approx(95.5)
    assert usd.max_date == END - timedelta(days=1)
    assert usd.min_unit_rate == pytest.approx(88.25)
    assert usd.min_date == END - timedelta(days=2)


def test_summary_uses_requests_client_by_default(monkeypatch) -> None:
    from cbr_fx.ingestion import cbr_requests

    fetcher = _DocumentFetcher({END: _document(END, "90,0000")})
    captured: dict[str, object] = {}

    def _factory(**kwargs):
        captured.update(kwargs)
        return fetcher

    monkeypatch.setattr(cbr_requests, "CBRRequestsClient", _factory)

    run = CbrFx(1, timeout=7).summary(END)

    assert captured == {"timeout": 7}
    assert run.processed == [END]


def test_malformed_nominal_counts_as_rejected_observation() -> None:
    document = _document(END, "90,0000").replace(
        b"</ValCurs>",
        b'<Valute ID="R01135"><CharCode>HUF</CharCode><Nominal>x</Nominal>'
        b"<Value>25,1234</Value></Valute></ValCurs>",
    )

    run = CbrFx(1, fetcher=_DocumentFetcher({END: document})).summary(END)

    assert run.rejected_observations == 1
    assert list(run.results) == ["USD"]


def test_cli_parse_args_defaults() -> None:
    args = window_summary.parse_args([])

    assert args.days == 90
    assert args.end is None
    assert args.currencies is None
    assert args.skip_repeated is False
    assert args.strict is False


def test_cli_rejects_non_positive_days() -> None:
    with pytest.raises(SystemExit):
        window_summary.parse_args(["--days", "0"])


def test_cli_parses_end_date_and_rejects_bad_ones(capsys) -> None:
    assert window_summary.parse_args(["--end", "2024-03-15"]).end == END

    with pytest.raises(SystemExit):
        window_summary.parse_args(["--end", "15/03/2024"])
    assert "--end" in capsys.readouterr().err


def test_cli_run_prints_table_and_writes_csv(monkeypatch, capsys, tmp_path) -> None:
    fetcher = _DocumentFetcher({END: _document(END, "90,0000")})
    monkeypatch.setattr(
        window_summary,
        "CbrFx",
        lambda days, **kwargs: CbrFx(days, fetcher=fetcher, **kwargs),
    )
    csv_path = tmp_path / "summary.csv"

    window_summary.main(
        ["--days", "2", "--end", "2024-03-15", "--currency", "usd", "--csv", str(csv_path)]
    )

    out = capsys.readouterr().out
    assert "USD" in out
    assert "90.0000" in out
    assert csv_path.exists()


def test_cli_run_with_no_data(monkeypatch, capsys) -> None:
    monkeypatch.setattr(
        window_summary,
        "CbrFx",
        lambda days, **kwargs: CbrFx(days, fetcher=_DocumentFetcher({}), **kwargs),
    )

    result = window_summary.run(window_summary.parse_args(["--days", "3", "--end", "2024-03-15"]))

    assert result.is_empty
    assert NO_DATA_MESSAGE in capsys.readouterr().out
