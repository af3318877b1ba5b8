"""Fetching and parsing of Bank of Russia daily rate documents."""
