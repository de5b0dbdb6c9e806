"""Purchase summary DTO."""

import attrs

from src.service.ticket_purchase.domain.value_object.ticket_counts import TicketCounts


@attrs.define(frozen=True)
class PurchaseSummary:
    """What a successful purchase charged and reserved."""

    account_id: int
    counts: TicketCounts
    total_price: int
    total_seats: int
