#!/usr/bin/env python
"""
Purchase Examples Script
Run a set of valid and invalid purchases through the container-built use case

Payment and seat reservation use the mock services wired in the DI container,
so nothing is charged or reserved for real.

Usage:
    python -m script.purchase_examples
"""

from dataclasses import dataclass

from src.platform.config import di
from src.platform.logging.loguru_io import Logger
from src.service.ticket_purchase.app.command.purchase_tickets_use_case import (
    PurchaseTicketsUseCase,
)
from src.service.ticket_purchase.domain.enum.ticket_category import TicketCategory
from src.service.ticket_purchase.domain.errors import InvalidPurchaseError
from src.service.ticket_purchase.domain.value_object.ticket_category_request import (
    TicketCategoryRequest,
)


@dataclass
class PurchaseExample:
    """One scripted purchase"""
    title: str
    account_id: int
    requests: list[tuple[TicketCategory, int]]


EXAMPLES = [
    PurchaseExample('3 adults', 1, [(TicketCategory.ADULT, 3)]),
    PurchaseExample(
        '2 adults, 3 children, 1 infant',
        2,
        [(TicketCategory.ADULT, 2), (TicketCategory.CHILD, 3), (TicketCategory.INFANT, 1)],
    ),
    PurchaseExample('maximum allowed (25 adults)', 3, [(TicketCategory.ADULT, 25)]),
    PurchaseExample('26 adults (over the limit)', 4, [(TicketCategory.ADULT, 26)]),
    PurchaseExample('children without an adult', 5, [(TicketCategory.CHILD, 2)]),
    PurchaseExample(
        '3 infants with 1 adult', 6, [(TicketCategory.ADULT, 1), (TicketCategory.INFANT, 3)]
    ),
    PurchaseExample('invalid account id (0)', 0, [(TicketCategory.ADULT, 1)]),
    PurchaseExample(
        'multiple adult requests',
        8,
        [(TicketCategory.ADULT, 2), (TicketCategory.ADULT, 3), (TicketCategory.CHILD, 1)],
    ),
    PurchaseExample(
        'infants equal to adults', 9, [(TicketCategory.ADULT, 5), (TicketCategory.INFANT, 5)]
    ),
    PurchaseExample(
        '10 adults, 8 children, 5 infants',
        10,
        [(TicketCategory.ADULT, 10), (TicketCategory.CHILD, 8), (TicketCategory.INFANT, 5)],
    ),
]


def run_example(use_case: PurchaseTicketsUseCase, example: PurchaseExample) -> str:
    requests = [
        TicketCategoryRequest(category, quantity) for category, quantity in example.requests
    ]
    try:
        summary = use_case.purchase_tickets(account_id=example.account_id, requests=requests)
    except InvalidPurchaseError as e:
        return f'✗ {example.title}: rejected ({e.reason}) - {e.message}'
    return (
        f'✓ {example.title}: paid {summary.total_price}, '
        f'seats {summary.total_seats}, tickets {summary.counts.total}'
    )


def run_examples() -> list[str]:
    di.setup()
    try:
        use_case = PurchaseTicketsUseCase.depends()
        return [run_example(use_case, example) for example in EXAMPLES]
    finally:
        di.cleanup()


def main():
    """Main function"""
    Logger.base.info('🎬 ==================== PURCHASE EXAMPLES ====================')
    for line in run_examples():
        Logger.base.info(line)
    Logger.base.info('🎬 ==================== EXAMPLES COMPLETE ====================')


if __name__ == '__main__':
    main()
