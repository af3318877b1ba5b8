"""Shared helpers for :mod:`cbr_fx`."""
