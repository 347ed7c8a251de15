"""OSPA Scorer: point registry for the Outstanding School Paper Adviser search."""

__version__ = "1.0.0"
