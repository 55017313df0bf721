"""Accounts as reported by the aggregator."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class AccountBalances(BaseModel):
    available: Decimal | None = None
    current: Decimal | None = None
    limit: Decimal | None = None
    iso_currency_code: str | None = Field(default=None, max_length=3)

    model_config = ConfigDict(frozen=True)


class LinkedAccount(BaseModel):
    """One account under a linked item.

    ``balances`` is only filled on fresh aggregator responses; the copy
    cached on the item is stored without it.
    """

    account_id: str
    name: str
    official_name: str | None = None
    mask: str | None = None
    type: str
    subtype: str | None = None
    balances: AccountBalances | None = None

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    def without_balances(self) -> "LinkedAccount":
        return self.model_copy(update={"balances": None})


class ItemAccounts(BaseModel):
    """Accounts of one item plus the institution that holds them."""

    institution_id: str | None = None
    accounts: list[LinkedAccount] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)
