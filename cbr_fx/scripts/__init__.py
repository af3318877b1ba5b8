"""Command-line entry points for :mod:`cbr_fx`."""
