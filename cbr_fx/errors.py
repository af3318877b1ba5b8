"""Exception hierarchy shared by the fetcher, parser and aggregation engine."""

from __future__ import annotations


class CbrFxError(Exception):
    """Base class for every error raised by :mod:`cbr_fx`."""


class FetchError(CbrFxError):
    """Transport failure while retrieving the snapshot for one date."""


class ParseError(CbrFxError):
    """Malformed document, or a malformed field inside one observation."""


class InvalidNominalError(ParseError):
    """Observation quoted against a non-positive nominal."""


__all__ = ["CbrFxError", "FetchError", "ParseError", "InvalidNominalError"]
