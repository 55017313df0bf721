from tillbook.application.queries.admin.admin_stats_query import (
    AdminStats,
    AdminStatsQuery,
)
from tillbook.application.queries.admin.list_users_query import ListUsersWithStatsQuery

__all__ = ["AdminStats", "AdminStatsQuery", "ListUsersWithStatsQuery"]
