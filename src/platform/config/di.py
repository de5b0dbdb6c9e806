"""
https://python-dependency-injector.ets-labs.org/index.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.service.ticket_purchase.domain.purchase_validator import PurchaseValidator
from src.service.ticket_purchase.driven_adapter.payment.mock_ticket_payment_service_impl import (
    MockTicketPaymentServiceImpl,
)
from src.service.ticket_purchase.driven_adapter.seat.mock_seat_reservation_service_impl import (
    MockSeatReservationServiceImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Immutable purchase rules built once from settings
    purchase_config = providers.Singleton(Settings.to_purchase_config, config_service)

    # Domain
    purchase_validator = providers.Singleton(PurchaseValidator, config=purchase_config)

    # External collaborators (mock implementations; override for real gateways)
    ticket_payment_service = providers.Singleton(MockTicketPaymentServiceImpl)
    seat_reservation_service = providers.Singleton(MockSeatReservationServiceImpl)


container = Container()


def setup() -> None:
    from src.platform.config.wire_modules import WIRE_MODULES

    container.config_service()
    container.wire(modules=WIRE_MODULES)


def cleanup() -> None:
    container.unwire()
    container.reset_singletons()
