"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between scripts and tests.
"""

from types import ModuleType

from src.service.ticket_purchase.app.command import purchase_tickets_use_case


WIRE_MODULES: list[ModuleType] = [
    purchase_tickets_use_case,
]
