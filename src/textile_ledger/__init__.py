"""Textile Ledger: order and invoice derivation engine with a stateless API."""

__version__ = "1.0.0"
