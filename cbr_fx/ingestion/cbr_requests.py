"""requests-based downloader for the Bank of Russia ``XML_daily.asp`` feed."""

from __future__ import annotations

from datetime import date
from typing import Optional

import requests

from cbr_fx.errors import FetchError
from cbr_fx.utils.cbr import (
    CBR_DAILY_URL,
    CBR_REQUEST_DATE_FORMAT,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
)
from cbr_fx.utils.logger import get_logger

LOGGER = get_logger(__name__)


class CBRRequestsClient:
    """Download one daily rates document per call using a shared session.

    The client performs exactly one request per :meth:`fetch`; callers that want
    retries wrap it themselves.
    """

    def __init__(
        self,
        *,
        base_url: str = CBR_DAILY_URL,
        timeout: int | float = DEFAULT_TIMEOUT,
        date_format: str = CBR_REQUEST_DATE_FORMAT,
        user_agent: str = DEFAULT_USER_AGENT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self.date_format = date_format
        self.user_agent = user_agent
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self.headers = {
            "User-Agent": self.user_agent,
            "Accept": "application/xml,text/xml;q=0.9,*/*;q=0.8",
        }

    def build_params(self, day: date) -> dict[str, str]:
        return {"date_req": day.strftime(self.date_format)}

    def fetch(self, day: date) -> bytes:
        """Return the raw (still windows-1251 encoded) document for ``day``."""

        params = self.build_params(day)
        LOGGER.debug("Requesting %s with %s", self.base_url, params)
        try:
            response = self.session.get(
                self.base_url, params=params, headers=self.headers, timeout=self.timeout
            )
        except requests.RequestException as exc:
            raise FetchError(f"Request for {day.isoformat()} failed: {exc}") from exc
        self._raise_with_context(response, day)
        return response.content

    @staticmethod
    def _raise_with_context(response: requests.Response, day: date) -> None:
        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = response.status_code
            hint = ""
            if status in {403, 429}:
                hint = " The CBR site throttles automated clients; try again later."
            raise FetchError(
                f"CBR responded with HTTP {status} for {day.isoformat()}.{hint}"
            ) from exc

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "CBRRequestsClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


__all__ = ["CBRRequestsClient"]
