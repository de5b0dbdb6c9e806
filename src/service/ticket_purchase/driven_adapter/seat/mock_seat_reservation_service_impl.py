"""Mock seat reservation service for local runs and demos."""

from src.platform.logging.loguru_io import Logger
from src.service.ticket_purchase.app.interface.i_seat_reservation_service import (
    ISeatReservationService,
)


class MockSeatReservationServiceImpl(ISeatReservationService):
    """Logs and records reservations instead of touching a real seat inventory."""

    def __init__(self) -> None:
        self.reservations: list[dict[str, int]] = []

    @Logger.io
    def reserve_seat(self, account_id: int, seat_count: int) -> None:
        if any(not isinstance(v, int) or isinstance(v, bool) for v in (account_id, seat_count)):
            raise TypeError('account_id and seat_count must be integers')
        if account_id <= 0:
            raise ValueError('account_id must be greater than zero')
        if seat_count < 0:
            raise ValueError('seat_count must not be negative')

        self.reservations.append({'account_id': account_id, 'seat_count': seat_count})
        Logger.base.info(f'🎟️ [MOCK-SEAT] account={account_id} seats={seat_count}')
