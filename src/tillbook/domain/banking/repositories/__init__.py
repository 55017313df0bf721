from tillbook.domain.banking.repositories.linked_item_repository import (
    LinkedItemRepository,
)

__all__ = ["LinkedItemRepository"]
