"""Ticket purchase domain errors."""

from typing import Final

from src.platform.exception.exceptions import DomainError
from src.service.ticket_purchase.domain.enum.purchase_rejection_reason import (
    PurchaseRejectionReason,
)


class PurchaseErrorMessage:
    """Human-readable messages for each rejection reason."""

    INVALID_ACCOUNT: Final[str] = 'Account ID must be a positive integer'
    NO_REQUESTS: Final[str] = 'At least one ticket type request must be provided'
    INVALID_REQUEST: Final[str] = 'Invalid ticket type request'
    UNKNOWN_CATEGORY: Final[str] = (
        'Invalid ticket type request: unknown ticket category {category!r}'
    )
    NON_POSITIVE_QUANTITY: Final[str] = 'Number of tickets must be greater than zero'
    LIMIT_EXCEEDED: Final[str] = 'Cannot purchase more than {max_tickets} tickets at a time'
    MISSING_ADULT: Final[str] = (
        'Child and Infant tickets cannot be purchased without at least one Adult ticket'
    )
    INFANT_RATIO_EXCEEDED: Final[str] = (
        'Number of Infant tickets cannot exceed the number of Adult tickets '
        '(Infants sit on Adult laps)'
    )


class InvalidPurchaseError(DomainError):
    """Raised on the first business rule a purchase request violates."""

    def __init__(self, reason: PurchaseRejectionReason, message: str) -> None:
        self.reason = reason
        super().__init__(message)

    def __repr__(self) -> str:
        return f'InvalidPurchaseError(reason={self.reason!r}, message={self.message!r})'
