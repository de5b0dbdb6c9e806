"""
Seat Reservation Service Interface
Reserves seats in the auditorium for an account.
"""

from abc import ABC, abstractmethod


class ISeatReservationService(ABC):
    @abstractmethod
    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        """Reserve `seat_count` seats (infants excluded) for the account."""
        pass
