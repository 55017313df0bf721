import logging
from uuid import UUID

from fastapi import APIRouter, status

from tillbook.application.commands import DeleteUserCommand, UpdateUserRoleCommand
from tillbook.application.queries import AdminStatsQuery, ListUsersWithStatsQuery
from tillbook.presentation.api.dependencies import AdminUser, RepoFactory
from tillbook.presentation.api.schemas.admin import (
    AdminStatsResponse,
    AdminUserResponse,
    AggregateStatsResponse,
    UpdateRoleRequest,
    UserStatsResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin")


@router.get(
    "/stats",
    summary="Platform statistics",
    responses={403: {"description": "Admin access required"}},
)
async def get_stats(_admin: AdminUser, factory: RepoFactory) -> AdminStatsResponse:
    """User counts and ledger totals across every tenant."""
    stats = await AdminStatsQuery.from_factory(factory).execute()
    return AdminStatsResponse(
        users=UserStatsResponse(
            total_users=stats.users.total_users,
            onboarded_users=stats.users.onboarded_users,
            active_today=stats.users.active_today,
            team_members=stats.users.team_members,
        ),
        aggregate=AggregateStatsResponse(
            total_expenses=stats.aggregate.total_expenses,
            total_transactions=stats.aggregate.total_transactions,
            total_revenue=stats.aggregate.total_revenue,
            avg_expense_per_user=stats.aggregate.avg_expense_per_user,
        ),
    )


@router.get(
    "/users",
    summary="List all users",
    responses={403: {"description": "Admin access required"}},
)
async def list_users(_admin: AdminUser, factory: RepoFactory) -> list[AdminUserResponse]:
    """All profiles, newest first, with transaction count and expense total."""
    overviews = await ListUsersWithStatsQuery.from_factory(factory).execute()
    return [
        AdminUserResponse(
            id=o.id,
            email=o.email,
            role=o.role,
            full_name=o.full_name,
            company_name=o.company_name,
            onboarding_completed=o.onboarding_completed,
            created_at=o.created_at,
            updated_at=o.updated_at,
            transaction_count=o.transaction_count,
            total_expenses=o.total_expenses,
        )
        for o in overviews
    ]


@router.patch(
    "/users/{user_id}/role",
    summary="Change a user's role",
    responses={
        403: {"description": "Admin access required"},
        404: {"description": "User not found"},
        422: {"description": "Cannot remove your own admin role"},
    },
)
async def update_user_role(
    user_id: UUID,
    request: UpdateRoleRequest,
    admin: AdminUser,
    factory: RepoFactory,
) -> AdminUserResponse:
    user = await UpdateUserRoleCommand.from_factory(factory).execute(
        user_id=user_id,
        new_role=request.role,
        requesting_admin_id=admin.id,
    )
    await factory.session.commit()
    logger.info("Admin %s set role of %s to %s", admin.email, user.email, user.role.value)

    activity = (await factory.admin_read_port().activity_by_user()).get(user.id)
    return AdminUserResponse(
        id=user.id,
        email=user.email,
        role=user.role.value,
        full_name=user.full_name,
        company_name=user.company_name,
        onboarding_completed=user.onboarding_completed,
        created_at=user.created_at,
        updated_at=user.updated_at,
        transaction_count=activity.transaction_count if activity else 0,
        total_expenses=activity.total_expenses if activity else 0,
    )


@router.delete(
    "/users/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a user",
    responses={
        403: {"description": "Admin access required"},
        404: {"description": "User not found"},
        422: {"description": "Cannot delete yourself"},
    },
)
async def delete_user(user_id: UUID, admin: AdminUser, factory: RepoFactory) -> None:
    await DeleteUserCommand.from_factory(factory).execute(
        user_id=user_id,
        requesting_admin_id=admin.id,
    )
    await factory.session.commit()
    logger.info("Admin %s deleted user %s", admin.email, user_id)
