from tillbook.domain.banking.ports.bank_data_aggregator_port import (
    BankDataAggregatorPort,
)

__all__ = ["BankDataAggregatorPort"]
