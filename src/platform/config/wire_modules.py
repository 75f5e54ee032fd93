"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.ticketcare.app.command import (
    create_ticket_type_use_case,
    create_time_slot_use_case,
    remove_time_slot_use_case,
    update_inventory_use_case,
    update_ticket_type_use_case,
    upload_file_use_case,
)
from src.service.ticketcare.app.query import (
    list_customers_use_case,
    list_events_use_case,
    list_inventory_use_case,
    list_orders_use_case,
    list_ticket_types_use_case,
    list_time_slots_use_case,
    list_users_use_case,
    list_venues_use_case,
)
from src.service.ticketcare.driving_adapter.http_controller.auth import session_auth


WIRE_MODULES: list[ModuleType] = [
    create_ticket_type_use_case,
    update_ticket_type_use_case,
    update_inventory_use_case,
    create_time_slot_use_case,
    remove_time_slot_use_case,
    upload_file_use_case,
    list_events_use_case,
    list_venues_use_case,
    list_ticket_types_use_case,
    list_time_slots_use_case,
    list_orders_use_case,
    list_customers_use_case,
    list_users_use_case,
    list_inventory_use_case,
    session_auth,
]
