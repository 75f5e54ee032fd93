"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.ticketcare.driven_adapter.model.customer_model import CustomerModel
from src.service.ticketcare.driven_adapter.model.event_date_model import EventDateModel
from src.service.ticketcare.driven_adapter.model.event_model import EventModel
from src.service.ticketcare.driven_adapter.model.inventory_model import InventoryModel
from src.service.ticketcare.driven_adapter.model.order_model import OrderModel
from src.service.ticketcare.driven_adapter.model.organizer_model import OrganizerModel
from src.service.ticketcare.driven_adapter.model.ticket_model import TicketModel
from src.service.ticketcare.driven_adapter.model.ticket_type_model import TicketTypeModel
from src.service.ticketcare.driven_adapter.model.time_slot_model import TimeSlotModel
from src.service.ticketcare.driven_adapter.model.user_model import UserModel
from src.service.ticketcare.driven_adapter.model.venue_model import VenueModel

__all__ = [
    'CustomerModel',
    'EventDateModel',
    'EventModel',
    'InventoryModel',
    'OrderModel',
    'OrganizerModel',
    'TicketModel',
    'TicketTypeModel',
    'TimeSlotModel',
    'UserModel',
    'VenueModel',
]
