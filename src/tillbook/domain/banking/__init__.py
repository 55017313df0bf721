"""Banking domain: linked aggregator items and their accounts and transactions."""

from tillbook.domain.banking.entities import ItemStatus, LinkedItem
from tillbook.domain.banking.exceptions import (
    AggregatorError,
    AggregatorNotConfiguredError,
    AggregatorRequestError,
    BankingDomainError,
    InstitutionNotFoundError,
    ItemLoginRequiredError,
    LinkedItemNotFoundError,
    NoConnectedAccountsError,
)
from tillbook.domain.banking.ports import BankDataAggregatorPort
from tillbook.domain.banking.repositories import LinkedItemRepository

__all__ = [
    "AggregatorError",
    "AggregatorNotConfiguredError",
    "AggregatorRequestError",
    "BankDataAggregatorPort",
    "BankingDomainError",
    "InstitutionNotFoundError",
    "ItemLoginRequiredError",
    "ItemStatus",
    "LinkedItem",
    "LinkedItemNotFoundError",
    "LinkedItemRepository",
    "NoConnectedAccountsError",
]
