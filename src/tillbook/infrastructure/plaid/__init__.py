"""Plaid integration (plaid-python SDK)."""

from tillbook.infrastructure.plaid.client import PlaidLinkConfig, create_plaid_api
from tillbook.infrastructure.plaid.plaid_adapter import PlaidAggregatorAdapter

__all__ = ["PlaidAggregatorAdapter", "PlaidLinkConfig", "create_plaid_api"]
