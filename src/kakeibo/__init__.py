"""Kakeibo: a local-only household ledger for the command line."""

__version__ = "0.1.0"
