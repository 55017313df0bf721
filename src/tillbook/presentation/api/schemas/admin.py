from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel

from tillbook.domain.user import UserRole


class UserStatsResponse(BaseModel):
    total_users: int
    onboarded_users: int
    active_today: int
    team_members: int


class AggregateStatsResponse(BaseModel):
    total_expenses: Decimal
    total_transactions: int
    total_revenue: Decimal
    avg_expense_per_user: Decimal


class AdminStatsResponse(BaseModel):
    users: UserStatsResponse
    aggregate: AggregateStatsResponse


class AdminUserResponse(BaseModel):
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


class UpdateRoleRequest(BaseModel):
    role: UserRole
