from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Boolean, DateTime, ForeignKey, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.platform.database.orm_db_setting import Base
from src.platform.types.big_int_types import BigInt, BigIntId
from src.service.ticketcare.domain.enum.event_status import EventStatus

if TYPE_CHECKING:
    from src.service.ticketcare.driven_adapter.model.event_date_model import EventDateModel
    from src.service.ticketcare.driven_adapter.model.organizer_model import OrganizerModel
    from src.service.ticketcare.driven_adapter.model.ticket_type_model import TicketTypeModel
    from src.service.ticketcare.driven_adapter.model.venue_model import VenueModel


class EventModel(Base):
    __tablename__ = 'event'

    id: Mapped[BigInt] = mapped_column(BigIntId, primary_key=True, autoincrement=True)
    organizer_id: Mapped[str] = mapped_column(
        String(64), ForeignKey('organizer.id'), index=True, nullable=False
    )
    venue_id: Mapped[Optional[BigInt]] = mapped_column(BigIntId, ForeignKey('venue.id'))
    venue_name: Mapped[Optional[str]] = mapped_column(String(255))
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    start_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    doors_open: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
    status: Mapped[str] = mapped_column(
        String(20), default=EventStatus.DRAFT, nullable=False, index=True
    )
    is_public: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    organizer: Mapped['OrganizerModel'] = relationship('OrganizerModel', back_populates='events')
    venue: Mapped[Optional['VenueModel']] = relationship('VenueModel')
    event_dates: Mapped[List['EventDateModel']] = relationship(
        'EventDateModel', back_populates='event', cascade='all, delete-orphan'
    )
    ticket_types: Mapped[List['TicketTypeModel']] = relationship(
        'TicketTypeModel', back_populates='event'
    )
