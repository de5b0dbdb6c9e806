"""
Ticket Payment Service Interface
Charges an account for a ticket purchase.
"""

from abc import ABC, abstractmethod


class ITicketPaymentService(ABC):
    @abstractmethod
    def make_payment(self, account_id: int, amount: int) -> None:
        """
        Charge the account.

        Args:
            account_id: Positive account identifier
            amount: Total price, non-negative
        """
        pass
