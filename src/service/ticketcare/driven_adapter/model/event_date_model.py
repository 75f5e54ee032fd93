from datetime import date
from typing import TYPE_CHECKING, List

from sqlalchemy import Date, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.platform.database.orm_db_setting import Base
from src.platform.types.big_int_types import BigInt, BigIntId

if TYPE_CHECKING:
    from src.service.ticketcare.driven_adapter.model.event_model import EventModel
    from src.service.ticketcare.driven_adapter.model.time_slot_model import TimeSlotModel


class EventDateModel(Base):
    __tablename__ = 'event_date'

    id: Mapped[BigInt] = mapped_column(BigIntId, primary_key=True, autoincrement=True)
    event_id: Mapped[BigInt] = mapped_column(
        BigIntId, ForeignKey('event.id', ondelete='CASCADE'), index=True, nullable=False
    )
    date: Mapped[date] = mapped_column(Date, nullable=False)

    event: Mapped['EventModel'] = relationship('EventModel', back_populates='event_dates')
    time_slots: Mapped[List['TimeSlotModel']] = relationship(
        'TimeSlotModel', back_populates='event_date', cascade='all, delete-orphan'
    )
