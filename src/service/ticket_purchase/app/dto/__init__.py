"""Application layer DTOs"""

from src.service.ticket_purchase.app.dto.purchase_summary import PurchaseSummary

__all__ = ['PurchaseSummary']
