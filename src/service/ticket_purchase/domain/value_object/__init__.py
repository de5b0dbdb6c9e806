"""Ticket Purchase Domain Value Objects"""

from src.service.ticket_purchase.domain.value_object.purchase_config import (
    CategoryPrices,
    PurchaseConfig,
)
from src.service.ticket_purchase.domain.value_object.ticket_category_request import (
    TicketCategoryRequest,
)
from src.service.ticket_purchase.domain.value_object.ticket_counts import TicketCounts

__all__ = ['CategoryPrices', 'PurchaseConfig', 'TicketCategoryRequest', 'TicketCounts']
