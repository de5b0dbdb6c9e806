"""Mock ticket payment service for local runs and demos."""

from src.platform.logging.loguru_io import Logger
from src.service.ticket_purchase.app.interface.i_ticket_payment_service import (
    ITicketPaymentService,
)


class MockTicketPaymentServiceImpl(ITicketPaymentService):
    """Logs and records payments instead of charging a real payment gateway."""

    def __init__(self) -> None:
        self.payments: list[dict[str, int]] = []  # Store payments for inspection

    @Logger.io
    def make_payment(self, account_id: int, amount: int) -> None:
        if any(not isinstance(v, int) or isinstance(v, bool) for v in (account_id, amount)):
            raise TypeError('account_id and amount must be integers')
        if account_id <= 0:
            raise ValueError('account_id must be greater than zero')
        if amount < 0:
            raise ValueError('amount must not be negative')

        self.payments.append({'account_id': account_id, 'amount': amount})
        Logger.base.info(f'💰 [MOCK-PAYMENT] account={account_id} amount={amount}')
