"""Ticket Purchase Domain Enums"""

from src.service.ticket_purchase.domain.enum.purchase_rejection_reason import (
    PurchaseRejectionReason,
)
from src.service.ticket_purchase.domain.enum.ticket_category import TicketCategory

__all__ = ['PurchaseRejectionReason', 'TicketCategory']
