"""
Ticket Category Enum - Domain Value Object

Fixed classification of cinema tickets. Infants sit on an adult's lap and
never occupy a seat.
"""

from enum import StrEnum


class TicketCategory(StrEnum):
    ADULT = 'adult'
    CHILD = 'child'
    INFANT = 'infant'

    @property
    def occupies_seat(self) -> bool:
        return self is not TicketCategory.INFANT

    @classmethod
    def parse(cls, value: 'str | TicketCategory') -> 'TicketCategory':
        """Accept a member or its name in any case ('ADULT', 'adult', 'Adult')."""
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())
