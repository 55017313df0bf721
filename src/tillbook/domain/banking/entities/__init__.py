from tillbook.domain.banking.entities.linked_item import ItemStatus, LinkedItem

__all__ = ["ItemStatus", "LinkedItem"]
