"""Bank of Russia endpoint constants and defaults used across the package."""

from __future__ import annotations

from typing import Final

CBR_DAILY_URL: Final[str] = "https://www.cbr.ru/scripts/XML_daily.asp"
CBR_REQUEST_DATE_FORMAT: Final[str] = "%d/%m/%Y"
CBR_DOCUMENT_DATE_FORMAT: Final[str] = "%d.%m.%Y"
# XML_daily.asp declares encoding="windows-1251" in its prolog.
CBR_ENCODING: Final[str] = "windows-1251"

DEFAULT_WINDOW_DAYS: Final[int] = 90
DEFAULT_TIMEOUT: Final[int] = 30
DEFAULT_USER_AGENT: Final[str] = "cbr-fx/0.1 (+https://www.cbr.ru/development/sxml/)"

__all__ = [
    "CBR_DAILY_URL",
    "CBR_REQUEST_DATE_FORMAT",
    "CBR_DOCUMENT_DATE_FORMAT",
    "CBR_ENCODING",
    "DEFAULT_WINDOW_DAYS",
    "DEFAULT_TIMEOUT",
    "DEFAULT_USER_AGENT",
]
