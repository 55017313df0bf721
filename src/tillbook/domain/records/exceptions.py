from tillbook.domain.shared.exceptions import EntityNotFoundError, ErrorCode


class InvoiceNotFoundError(EntityNotFoundError):
    default_code = ErrorCode.INVOICE_NOT_FOUND

    def __init__(self, record_id: str) -> None:
        self.record_id = record_id
        super().__init__(f"Invoice not found: {record_id}")


class CompanyAssetNotFoundError(EntityNotFoundError):
    default_code = ErrorCode.ASSET_NOT_FOUND

    def __init__(self, record_id: str) -> None:
        self.record_id = record_id
        super().__init__(f"Asset not found: {record_id}")


class AgreementNotFoundError(EntityNotFoundError):
    default_code = ErrorCode.AGREEMENT_NOT_FOUND

    def __init__(self, record_id: str) -> None:
        self.record_id = record_id
        super().__init__(f"Agreement not found: {record_id}")
