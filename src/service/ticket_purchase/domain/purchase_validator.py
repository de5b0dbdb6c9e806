"""
Purchase Validator Domain
Pure purchase rules - no payment, no seat inventory, no I/O.
"""

from collections.abc import Sequence
from typing import Any

from src.platform.logging.loguru_io import Logger
from src.service.ticket_purchase.domain.enum.purchase_rejection_reason import (
    PurchaseRejectionReason,
)
from src.service.ticket_purchase.domain.errors import InvalidPurchaseError, PurchaseErrorMessage
from src.service.ticket_purchase.domain.value_object.purchase_config import PurchaseConfig
from src.service.ticket_purchase.domain.value_object.ticket_category_request import (
    TicketCategoryRequest,
)
from src.service.ticket_purchase.domain.value_object.ticket_counts import TicketCounts


class PurchaseValidator:
    """
    Validates a purchase request and computes what it costs.

    Rules are checked in a fixed order and the first violation is raised as
    InvalidPurchaseError:
    1. account id is a positive integer
    2. at least one request
    3. every request is a TicketCategoryRequest with quantity > 0
    4. total tickets <= max_tickets
    5. child or infant tickets need at least one adult ticket
    6. infants <= adults (only when enforce_infant_ratio is on)
    """

    def __init__(self, *, config: PurchaseConfig) -> None:
        self.config = config

    @Logger.io
    def validate(
        self, *, account_id: Any, requests: Sequence[TicketCategoryRequest] | None
    ) -> TicketCounts:
        self._validate_account_id(account_id)
        ticket_requests = self._require_requests(requests)
        self._validate_request_items(ticket_requests)

        counts = TicketCounts.from_requests(ticket_requests)
        self._validate_business_rules(counts)
        return counts

    def calculate_total_price(self, counts: TicketCounts) -> int:
        return counts.price(self.config.category_prices)

    @staticmethod
    def calculate_total_seats(counts: TicketCounts) -> int:
        # Infants sit on adult laps
        return counts.seats

    @staticmethod
    def _validate_account_id(account_id: Any) -> None:
        if isinstance(account_id, bool) or not isinstance(account_id, int) or account_id <= 0:
            raise InvalidPurchaseError(
                PurchaseRejectionReason.INVALID_ACCOUNT, PurchaseErrorMessage.INVALID_ACCOUNT
            )

    @staticmethod
    def _require_requests(
        requests: Sequence[TicketCategoryRequest] | None,
    ) -> tuple[TicketCategoryRequest, ...]:
        if requests is None:
            raise InvalidPurchaseError(
                PurchaseRejectionReason.NO_REQUESTS, PurchaseErrorMessage.NO_REQUESTS
            )
        try:
            # Materialize once so iterators are not consumed by validation
            ticket_requests = tuple(requests)
        except TypeError:
            raise InvalidPurchaseError(
                PurchaseRejectionReason.INVALID_REQUEST, PurchaseErrorMessage.INVALID_REQUEST
            ) from None
        if not ticket_requests:
            raise InvalidPurchaseError(
                PurchaseRejectionReason.NO_REQUESTS, PurchaseErrorMessage.NO_REQUESTS
            )
        return ticket_requests

    @staticmethod
    def _validate_request_items(requests: Sequence[TicketCategoryRequest]) -> None:
        for request in requests:
            if not isinstance(request, TicketCategoryRequest):
                raise InvalidPurchaseError(
                    PurchaseRejectionReason.INVALID_REQUEST, PurchaseErrorMessage.INVALID_REQUEST
                )
            if not request.has_valid_category:
                raise InvalidPurchaseError(
                    PurchaseRejectionReason.INVALID_REQUEST,
                    PurchaseErrorMessage.UNKNOWN_CATEGORY.format(category=request.category),
                )
            if not request.has_valid_quantity:
                raise InvalidPurchaseError(
                    PurchaseRejectionReason.INVALID_REQUEST,
                    PurchaseErrorMessage.NON_POSITIVE_QUANTITY,
                )

    def _validate_business_rules(self, counts: TicketCounts) -> None:
        if counts.total > self.config.max_tickets:
            raise InvalidPurchaseError(
                PurchaseRejectionReason.LIMIT_EXCEEDED,
                PurchaseErrorMessage.LIMIT_EXCEEDED.format(max_tickets=self.config.max_tickets),
            )

        if (counts.child > 0 or counts.infant > 0) and counts.adult == 0:
            raise InvalidPurchaseError(
                PurchaseRejectionReason.MISSING_ADULT, PurchaseErrorMessage.MISSING_ADULT
            )

        if self.config.enforce_infant_ratio and counts.infant > counts.adult:
            raise InvalidPurchaseError(
                PurchaseRejectionReason.INFANT_RATIO_EXCEEDED,
                PurchaseErrorMessage.INFANT_RATIO_EXCEEDED,
            )
