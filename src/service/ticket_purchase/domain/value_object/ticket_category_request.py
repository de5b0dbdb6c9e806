"""Ticket category request value object."""

from typing import Any

import attrs

from src.service.ticket_purchase.domain.enum.ticket_category import TicketCategory


def _to_category(value: Any) -> Any:
    # Unknown names are kept as given and reported by PurchaseValidator
    try:
        return TicketCategory.parse(value)
    except ValueError:
        return value


@attrs.define(frozen=True)
class TicketCategoryRequest:
    """
    Request for a number of tickets of one category (Value Object).

    Category and quantity are checked when the purchase is validated, not
    here, so an invalid account is still reported before an invalid request.
    """

    category: TicketCategory = attrs.field(converter=_to_category)
    quantity: int

    @property
    def has_valid_category(self) -> bool:
        return isinstance(self.category, TicketCategory)

    @property
    def has_valid_quantity(self) -> bool:
        return (
            isinstance(self.quantity, int)
            and not isinstance(self.quantity, bool)
            and self.quantity > 0
        )
