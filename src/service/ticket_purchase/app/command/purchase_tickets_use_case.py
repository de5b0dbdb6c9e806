from collections.abc import Sequence
from typing import Self

from dependency_injector.wiring import Provide, inject

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticket_purchase.app.dto.purchase_summary import PurchaseSummary
from src.service.ticket_purchase.app.interface.i_seat_reservation_service import (
    ISeatReservationService,
)
from src.service.ticket_purchase.app.interface.i_ticket_payment_service import (
    ITicketPaymentService,
)
from src.service.ticket_purchase.domain.purchase_validator import PurchaseValidator
from src.service.ticket_purchase.domain.value_object.ticket_category_request import (
    TicketCategoryRequest,
)


class PurchaseTicketsUseCase:
    """
    Purchase tickets use case - validate, price, then pay and reserve

    Flow:
    1. Validate account and requests against purchase rules (Fail Fast)
    2. Calculate total price and seats to reserve
    3. Charge the account via payment service
    4. Reserve seats via seat reservation service

    Collaborators are only called once every rule has passed. Their failures
    propagate to the caller untouched: no retry, no rollback.

    Dependencies:
    - validator: Purchase rules and price/seat calculation
    - payment_service: Charges the account
    - seat_reservation_service: Reserves seats (infants excluded)
    """

    def __init__(
        self,
        *,
        validator: PurchaseValidator,
        payment_service: ITicketPaymentService,
        seat_reservation_service: ISeatReservationService,
    ) -> None:
        self.validator = validator
        self.payment_service = payment_service
        self.seat_reservation_service = seat_reservation_service

    @classmethod
    @inject
    def depends(
        cls,
        validator: PurchaseValidator = Provide[Container.purchase_validator],
        payment_service: ITicketPaymentService = Provide[Container.ticket_payment_service],
        seat_reservation_service: ISeatReservationService = Provide[
            Container.seat_reservation_service
        ],
    ) -> Self:
        return cls(
            validator=validator,
            payment_service=payment_service,
            seat_reservation_service=seat_reservation_service,
        )

    @Logger.io
    def purchase_tickets(
        self,
        *,
        account_id: int,
        requests: Sequence[TicketCategoryRequest],
    ) -> PurchaseSummary:
        """
        Purchase tickets for an account

        Args:
            account_id: Positive account identifier
            requests: One or more ticket category requests, same category may repeat

        Returns:
            Summary of what was charged and reserved

        Raises:
            InvalidPurchaseError: On the first purchase rule violated
        """
        counts = self.validator.validate(account_id=account_id, requests=requests)
        total_price = self.validator.calculate_total_price(counts)
        total_seats = self.validator.calculate_total_seats(counts)

        self.payment_service.make_payment(account_id, total_price)
        Logger.base.info(f'💳 [PURCHASE] Charged account {account_id}: {total_price}')

        self.seat_reservation_service.reserve_seat(account_id, total_seats)
        Logger.base.info(f'💺 [PURCHASE] Reserved {total_seats} seats for account {account_id}')

        return PurchaseSummary(
            account_id=account_id,
            counts=counts,
            total_price=total_price,
            total_seats=total_seats,
        )
