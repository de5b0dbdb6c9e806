"""Purchase configuration value objects."""

import attrs

from src.service.ticket_purchase.domain.enum.ticket_category import TicketCategory


def reject_bool(_instance: object, attribute: attrs.Attribute, value: object) -> None:
    # bool is an int subclass; True must not pass as a count or a limit
    if isinstance(value, bool):
        raise TypeError(f'{attribute.name} must be an integer, not bool')


def _validate_non_negative_price(_instance: object, attribute: attrs.Attribute, value: int) -> None:
    if value < 0:
        raise ValueError(f'{attribute.name} ticket price must be non-negative')


def _validate_adult_price(_instance: object, _attribute: attrs.Attribute, value: int) -> None:
    if value <= 0:
        raise ValueError('Adult ticket price must be greater than zero')


def _validate_max_tickets(_instance: object, _attribute: attrs.Attribute, value: int) -> None:
    if value <= 0:
        raise ValueError('max_tickets must be a positive integer')


_INT = [attrs.validators.instance_of(int), reject_bool]


@attrs.define(frozen=True)
class CategoryPrices:
    """
    Unit price per ticket category (Value Object).

    The adult price must be strictly positive; a zero adult price means the
    pricing table was never configured.
    """

    adult: int = attrs.field(default=25, validator=[*_INT, _validate_adult_price])
    child: int = attrs.field(default=15, validator=[*_INT, _validate_non_negative_price])
    infant: int = attrs.field(default=0, validator=[*_INT, _validate_non_negative_price])

    def for_category(self, category: TicketCategory) -> int:
        match category:
            case TicketCategory.ADULT:
                return self.adult
            case TicketCategory.CHILD:
                return self.child
            case TicketCategory.INFANT:
                return self.infant


@attrs.define(frozen=True)
class PurchaseConfig:
    """Rules applied to every purchase, loaded once and never mutated."""

    max_tickets: int = attrs.field(default=25, validator=[*_INT, _validate_max_tickets])
    category_prices: CategoryPrices = attrs.field(
        factory=CategoryPrices, validator=attrs.validators.instance_of(CategoryPrices)
    )
    enforce_infant_ratio: bool = attrs.field(
        default=True, validator=attrs.validators.instance_of(bool)
    )
