"""Application service: Show Sale use case (query)."""

from __future__ import annotations

from decimal import Decimal

from pos.application.dto import ReceiptDTO
from pos.application.mappers import to_receipt_dto
from pos.domain.exceptions import EntityNotFoundError
from pos.domain.repository.sale_repository import SaleRepository


class ShowSaleHandler:

    def __init__(self, sale_repo: SaleRepository, tax_rate: Decimal) -> None:
        self._sale_repo = sale_repo
        self._tax_rate = tax_rate

    def handle(self, sale_id: str) -> ReceiptDTO:
        sale = self._sale_repo.get_by_id(sale_id)
        if sale is None:
            raise EntityNotFoundError(f"Sale '{sale_id}' not found")
        return to_receipt_dto(sale, self._tax_rate)
