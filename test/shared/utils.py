"""Row builders for integration tests. Each adds, flushes and returns the model."""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from typing import Any, Optional

from sqlalchemy.orm import Session

from src.platform.types.big_int_types import BigInt
from src.service.ticketcare.domain.enum.event_status import EventStatus
from src.service.ticketcare.driven_adapter.model import (
    CustomerModel,
    EventDateModel,
    EventModel,
    InventoryModel,
    OrderModel,
    OrganizerModel,
    TicketModel,
    TicketTypeModel,
    TimeSlotModel,
    UserModel,
    VenueModel,
)


EVENT_START = datetime(2025, 7, 15, 18, 0, tzinfo=timezone.utc)


def _add(session: Session, model: Any) -> Any:
    session.add(model)
    session.flush()
    return model


def create_organizer(
    session: Session, *, organizer_id: str = 'org_1', slug: str = 'acme-live'
) -> OrganizerModel:
    return _add(
        session,
        OrganizerModel(
            id=organizer_id, name=slug.replace('-', ' ').title(), slug=slug, email=f'{slug}@x.io'
        ),
    )


def create_venue(session: Session, *, name: str, slug: Optional[str] = None) -> VenueModel:
    return _add(session, VenueModel(name=name, slug=slug or name.lower().replace(' ', '-')))


def create_event(
    session: Session,
    *,
    organizer_id: str,
    title: str,
    slug: Optional[str] = None,
    status: str = EventStatus.PUBLISHED,
    start_time: datetime = EVENT_START,
) -> EventModel:
    return _add(
        session,
        EventModel(
            organizer_id=organizer_id,
            title=title,
            slug=slug or title.lower().replace(' ', '-'),
            status=status,
            start_time=start_time,
            end_time=start_time + timedelta(hours=4),
        ),
    )


def create_event_date(session: Session, *, event_id: BigInt, day: date) -> EventDateModel:
    return _add(session, EventDateModel(event_id=event_id, date=day))


def create_time_slot(
    session: Session, *, event_date_id: BigInt, start_time: datetime, hours: int = 2
) -> TimeSlotModel:
    return _add(
        session,
        TimeSlotModel(
            event_date_id=event_date_id,
            start_time=start_time,
            end_time=start_time + timedelta(hours=hours),
            doors_open=start_time,
        ),
    )


def create_ticket_type(
    session: Session, *, event_id: BigInt, name: str = 'General Admission', price: str = '25.00'
) -> TicketTypeModel:
    return _add(
        session,
        TicketTypeModel(
            event_id=event_id,
            name=name,
            price=Decimal(price),
            max_per_order=10,
            min_per_order=1,
            sale_start_time=EVENT_START - timedelta(days=30),
            sale_end_time=EVENT_START,
        ),
    )


def create_inventory(
    session: Session, *, ticket_type_id: BigInt, time_slot_id: BigInt, quantity: int
) -> InventoryModel:
    return _add(
        session,
        InventoryModel(ticket_type_id=ticket_type_id, time_slot_id=time_slot_id, quantity=quantity),
    )


def create_customer(
    session: Session,
    *,
    customer_id: str,
    first_name: str,
    last_name: str = 'Doe',
    email: Optional[str] = None,
) -> CustomerModel:
    return _add(
        session,
        CustomerModel(
            id=customer_id,
            first_name=first_name,
            last_name=last_name,
            email=email or f'{first_name.lower()}@example.com',
        ),
    )


def create_user(
    session: Session, *, user_id: str, first_name: str, email: Optional[str] = None
) -> UserModel:
    return _add(
        session,
        UserModel(
            id=user_id,
            first_name=first_name,
            last_name='Smith',
            email=email or f'{first_name.lower()}@example.com',
        ),
    )


def create_order(
    session: Session,
    *,
    ordered_at: datetime,
    customer_id: Optional[str] = None,
    user_id: Optional[str] = None,
    total_amount: str = '50.00',
) -> OrderModel:
    return _add(
        session,
        OrderModel(
            customer_id=customer_id,
            user_id=user_id,
            status='completed',
            payment_method='card',
            total_amount=Decimal(total_amount),
            ordered_at=ordered_at,
        ),
    )


def create_ticket(
    session: Session,
    *,
    order_id: int,
    event_id: BigInt,
    ticket_type_id: BigInt,
    time_slot_id: Optional[BigInt] = None,
) -> TicketModel:
    return _add(
        session,
        TicketModel(
            order_id=order_id,
            event_id=event_id,
            ticket_type_id=ticket_type_id,
            time_slot_id=time_slot_id,
        ),
    )
