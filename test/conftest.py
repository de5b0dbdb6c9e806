"""
Test Configuration and Fixtures

This module provides:
- Test environment variables (set before any application import)
- Purchase config / validator fixtures
- Mocked payment and seat reservation collaborators

Architecture:
- Unit tests (test/**/unit/): pure domain and use case tests with mocked collaborators
- Platform / script tests: exercise settings, DI container and logging directly
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the loguru sinks are created at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ.setdefault('SERVICE_NAME', 'cinema-tickets-test')

    # Purchase settings must not leak in from the developer's shell
    for key in (
        'MAX_TICKETS',
        'TICKET_PRICE_ADULT',
        'TICKET_PRICE_CHILD',
        'TICKET_PRICE_INFANT',
        'ENFORCE_INFANT_ADULT_RATIO',
    ):
        os.environ.pop(key, None)


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from unittest.mock import Mock  # noqa: E402

import pytest  # noqa: E402

from src.service.ticket_purchase.app.command.purchase_tickets_use_case import (  # noqa: E402
    PurchaseTicketsUseCase,
)
from src.service.ticket_purchase.app.interface.i_seat_reservation_service import (  # noqa: E402
    ISeatReservationService,
)
from src.service.ticket_purchase.app.interface.i_ticket_payment_service import (  # noqa: E402
    ITicketPaymentService,
)
from src.service.ticket_purchase.domain.purchase_validator import PurchaseValidator  # noqa: E402
from src.service.ticket_purchase.domain.value_object.purchase_config import (  # noqa: E402
    PurchaseConfig,
)


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        if '/unit/' in str(item.path) or '\\unit\\' in str(item.path):
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def purchase_config() -> PurchaseConfig:
    """Default rules: 25 tickets max, 25/15/0 prices, infant ratio enforced"""
    return PurchaseConfig()


@pytest.fixture
def validator(purchase_config: PurchaseConfig) -> PurchaseValidator:
    return PurchaseValidator(config=purchase_config)


@pytest.fixture
def mock_payment_service() -> Mock:
    """Mock payment gateway"""
    return Mock(spec=ITicketPaymentService)


@pytest.fixture
def mock_seat_reservation_service() -> Mock:
    """Mock seat reservation service"""
    return Mock(spec=ISeatReservationService)


@pytest.fixture
def use_case(
    validator: PurchaseValidator, mock_payment_service: Mock, mock_seat_reservation_service: Mock
) -> PurchaseTicketsUseCase:
    """Create use case with mocked collaborators"""
    return PurchaseTicketsUseCase(
        validator=validator,
        payment_service=mock_payment_service,
        seat_reservation_service=mock_seat_reservation_service,
    )
