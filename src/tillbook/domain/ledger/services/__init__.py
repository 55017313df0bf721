from tillbook.domain.ledger.services.category_mapping import (
    AGGREGATOR_CATEGORY_MAP,
    convert_aggregator_transaction,
    map_category,
)

__all__ = [
    "AGGREGATOR_CATEGORY_MAP",
    "convert_aggregator_transaction",
    "map_category",
]
