"""Tests for the dependency injection container and wiring"""

from unittest.mock import Mock

import pytest

from src.platform.config import di
from src.service.ticket_purchase.app.command.purchase_tickets_use_case import (
    PurchaseTicketsUseCase,
)
from src.service.ticket_purchase.domain.purchase_validator import PurchaseValidator
from src.service.ticket_purchase.domain.value_object.purchase_config import PurchaseConfig
from src.service.ticket_purchase.domain.value_object.ticket_category_request import (
    TicketCategoryRequest,
)
from src.service.ticket_purchase.driven_adapter.payment.mock_ticket_payment_service_impl import (
    MockTicketPaymentServiceImpl,
)
from src.service.ticket_purchase.driven_adapter.seat.mock_seat_reservation_service_impl import (
    MockSeatReservationServiceImpl,
)


@pytest.fixture
def wired_container():
    di.setup()
    yield di.container
    di.cleanup()


def test_container_builds_validator_from_settings(wired_container):
    validator = wired_container.purchase_validator()

    assert isinstance(validator, PurchaseValidator)
    assert validator.config == PurchaseConfig()
    assert wired_container.purchase_validator() is validator


def test_container_provides_mock_collaborators(wired_container):
    assert isinstance(wired_container.ticket_payment_service(), MockTicketPaymentServiceImpl)
    assert isinstance(wired_container.seat_reservation_service(), MockSeatReservationServiceImpl)


def test_depends_injects_container_dependencies(wired_container):
    use_case = PurchaseTicketsUseCase.depends()

    use_case.purchase_tickets(account_id=1, requests=[TicketCategoryRequest('ADULT', 2)])

    assert use_case.validator is wired_container.purchase_validator()
    assert wired_container.ticket_payment_service().payments == [{'account_id': 1, 'amount': 50}]
    assert wired_container.seat_reservation_service().reservations == [
        {'account_id': 1, 'seat_count': 2}
    ]


def test_overridden_collaborator_is_injected(wired_container):
    payment_service = Mock()

    with wired_container.ticket_payment_service.override(payment_service):
        use_case = PurchaseTicketsUseCase.depends()
        use_case.purchase_tickets(
            account_id=9,
            requests=[TicketCategoryRequest('CHILD', 1), TicketCategoryRequest('ADULT', 1)],
        )

    payment_service.make_payment.assert_called_once_with(9, 40)


def test_cleanup_resets_singletons():
    di.setup()
    first = di.container.ticket_payment_service()
    di.cleanup()

    di.setup()
    try:
        assert di.container.ticket_payment_service() is not first
    finally:
        di.cleanup()


def test_cleanup_drops_recorded_mock_calls():
    """
    GIVEN: A purchase recorded by the container's mock collaborators
    WHEN: The container is cleaned up and set up again
    THEN: The new mock collaborators start with no recorded calls
    """
    di.setup()
    try:
        PurchaseTicketsUseCase.depends().purchase_tickets(
            account_id=1, requests=[TicketCategoryRequest('ADULT', 1)]
        )
        assert di.container.ticket_payment_service().payments
    finally:
        di.cleanup()

    di.setup()
    try:
        assert di.container.ticket_payment_service().payments == []
        assert di.container.seat_reservation_service().reservations == []
    finally:
        di.cleanup()
