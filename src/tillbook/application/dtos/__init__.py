from tillbook.application.dtos.admin import (
    AggregateStats,
    TenantActivity,
    UserOverview,
    UserStats,
)

__all__ = ["AggregateStats", "TenantActivity", "UserOverview", "UserStats"]
