"""Read models for the admin dashboard."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from uuid import UUID


@dataclass(frozen=True)
class UserStats:
    total_users: int
    onboarded_users: int
    active_today: int
    team_members: int


@dataclass(frozen=True)
class AggregateStats:
    total_expenses: Decimal
    total_transactions: int
    total_revenue: Decimal
    avg_expense_per_user: Decimal


@dataclass(frozen=True)
class TenantActivity:
    transaction_count: int = 0
    total_expenses: Decimal = field(default_factory=lambda: Decimal("0"))


@dataclass(frozen=True)
class UserOverview:
    """One row of the admin user table."""

    id: UUID
    email: str
    role: str
    full_name: str | None
    company_name: str | None
    onboarding_completed: bool
    created_at: datetime
    updated_at: datetime
    transaction_count: int
    total_expenses: Decimal
