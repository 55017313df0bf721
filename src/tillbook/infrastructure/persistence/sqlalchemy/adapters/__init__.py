from tillbook.infrastructure.persistence.sqlalchemy.adapters.admin_read_adapter import (
    SqlAlchemyAdminReadAdapter,
)

__all__ = ["SqlAlchemyAdminReadAdapter"]
