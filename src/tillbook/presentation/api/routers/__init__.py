from tillbook.presentation.api.routers.access import router as access_router
from tillbook.presentation.api.routers.admin import router as admin_router
from tillbook.presentation.api.routers.agreements import router as agreements_router
from tillbook.presentation.api.routers.assets import router as assets_router
from tillbook.presentation.api.routers.auth import router as auth_router
from tillbook.presentation.api.routers.invoices import router as invoices_router
from tillbook.presentation.api.routers.onboarding import router as onboarding_router
from tillbook.presentation.api.routers.plaid import router as plaid_router
from tillbook.presentation.api.routers.team import router as team_router
from tillbook.presentation.api.routers.transactions import router as transactions_router

__all__ = [
    "access_router",
    "admin_router",
    "agreements_router",
    "assets_router",
    "auth_router",
    "invoices_router",
    "onboarding_router",
    "plaid_router",
    "team_router",
    "transactions_router",
]
