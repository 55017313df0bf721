from tillbook.infrastructure.persistence.sqlalchemy.repositories.banking.linked_item_repository import (  # NOQA: E501
    LinkedItemRepositorySQLAlchemy,
)

__all__ = ["LinkedItemRepositorySQLAlchemy"]
