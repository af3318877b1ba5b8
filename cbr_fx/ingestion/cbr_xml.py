"""Parse Bank of Russia ``ValCurs`` documents into :class:`Snapshot` objects."""

from __future__ import annotations

import warnings
from dataclasses import dataclass
from datetime import date, datetime

from bs4 import BeautifulSoup, XMLParsedAsHTMLWarning

from cbr_fx.errors import ParseError
from cbr_fx.ingestion.models import CurrencyObservation, Snapshot
from cbr_fx.utils.cbr import CBR_DOCUMENT_DATE_FORMAT, CBR_ENCODING
from cbr_fx.utils.logger import get_logger

LOGGER = get_logger(__name__)


def _child_text(tag, name: str) -> str | None:
    child = tag.find(name)
    if child is None:
        return None
    text = child.get_text(strip=True)
    return text or None


def _parse_nominal(raw: str | None) -> int | str:
    if raw is None:
        return ""
    try:
        return int(raw.replace("\xa0", "").replace(" ", ""))
    except ValueError:
        return raw


@dataclass(slots=True)
class CBRXMLParser:
    """Decode and parse one ``XML_daily.asp`` response.

    The feed is served as windows-1251 and uses upper-camel tag names
    (``ValCurs``, ``Valute``, ``CharCode``). ``html.parser`` lower-cases tag and
    attribute names, so lookups below use the lower-case spelling.
    """

    encoding: str = CBR_ENCODING
    date_format: str = CBR_DOCUMENT_DATE_FORMAT

    def decode(self, raw: bytes) -> str:
        try:
            return raw.decode(self.encoding)
        except (UnicodeDecodeError, LookupError) as exc:
            raise ParseError(f"Unable to decode document as {self.encoding}: {exc}") from exc

    def parse(self, raw: bytes, *, requested_date: date | None = None) -> Snapshot:
        text = self.decode(raw)
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", XMLParsedAsHTMLWarning)
            soup = BeautifulSoup(text, "html.parser")
        root = soup.find("valcurs")
        if root is None:
            raise ParseError("Document does not contain a ValCurs element")

        rate_date = self._parse_document_date(root.get("date"))
        observations: list[CurrencyObservation] = []
        for valute in root.find_all("valute"):
            observation = self._parse_valute(valute, rate_date)
            if observation is not None:
                observations.append(observation)

        return Snapshot(
            rate_date=rate_date,
            observations=tuple(observations),
            requested_date=requested_date,
        )

    def _parse_document_date(self, raw: str | None) -> date:
        if not raw:
            raise ParseError("ValCurs element is missing its Date attribute")
        try:
            return datetime.strptime(raw.strip(), self.date_format).date()
        except ValueError as exc:
            raise ParseError(f"Unexpected ValCurs date {raw!r}") from exc

    @staticmethod
    def _parse_valute(valute, rate_date: date) -> CurrencyObservation | None:
        source_id = valute.get("id")
        char_code = _child_text(valute, "charcode")
        num_code = _child_text(valute, "numcode")
        identity = (char_code or source_id or num_code or "").strip().upper()
        if not identity:
            LOGGER.warning("Skipping Valute without any identifying code on %s", rate_date)
            return None

        return CurrencyObservation(
            identity=identity,
            nominal=_parse_nominal(_child_text(valute, "nominal")),
            value=_child_text(valute, "value") or "",
            name=_child_text(valute, "name"),
            num_code=num_code,
            source_id=source_id,
        )


__all__ = ["CBRXMLParser"]
