"""Tillbook - bookkeeping for small businesses with bank aggregation."""

__version__ = "0.1.0"
