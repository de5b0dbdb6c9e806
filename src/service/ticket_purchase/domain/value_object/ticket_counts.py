"""Aggregated ticket counts value object."""

from collections.abc import Iterable

import attrs

from src.service.ticket_purchase.domain.enum.ticket_category import TicketCategory
from src.service.ticket_purchase.domain.value_object.purchase_config import (
    CategoryPrices,
    reject_bool,
)
from src.service.ticket_purchase.domain.value_object.ticket_category_request import (
    TicketCategoryRequest,
)


def _validate_non_negative_count(_instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value < 0:
        raise ValueError(f'{attribute.name} count must be non-negative')


_COUNT = [attrs.validators.instance_of(int), reject_bool, _validate_non_negative_count]


@attrs.define(frozen=True)
class TicketCounts:
    """
    Per-category ticket totals for a single purchase (Value Object).

    Only lives for the duration of one validation pass.
    """

    adult: int = attrs.field(default=0, validator=_COUNT)
    child: int = attrs.field(default=0, validator=_COUNT)
    infant: int = attrs.field(default=0, validator=_COUNT)

    @classmethod
    def from_requests(cls, requests: Iterable[TicketCategoryRequest]) -> 'TicketCounts':
        counts = cls()
        for request in requests:
            counts = counts.add(request.category, request.quantity)
        return counts

    def add(self, category: TicketCategory, quantity: int) -> 'TicketCounts':
        match category:
            case TicketCategory.ADULT:
                return attrs.evolve(self, adult=self.adult + quantity)
            case TicketCategory.CHILD:
                return attrs.evolve(self, child=self.child + quantity)
            case TicketCategory.INFANT:
                return attrs.evolve(self, infant=self.infant + quantity)

    def for_category(self, category: TicketCategory) -> int:
        match category:
            case TicketCategory.ADULT:
                return self.adult
            case TicketCategory.CHILD:
                return self.child
            case TicketCategory.INFANT:
                return self.infant

    @property
    def total(self) -> int:
        return self.adult + self.child + self.infant

    @property
    def seats(self) -> int:
        return sum(
            self.for_category(category) for category in TicketCategory if category.occupies_seat
        )

    def price(self, prices: CategoryPrices) -> int:
        return sum(
            self.for_category(category) * prices.for_category(category)
            for category in TicketCategory
        )
