from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.platform.database.orm_db_setting import Base
from src.platform.types.big_int_types import BigInt, BigIntId

if TYPE_CHECKING:
    from src.service.ticketcare.driven_adapter.model.event_date_model import EventDateModel
    from src.service.ticketcare.driven_adapter.model.inventory_model import InventoryModel


class TimeSlotModel(Base):
    __tablename__ = 'time_slot'

    id: Mapped[BigInt] = mapped_column(BigIntId, primary_key=True, autoincrement=True)
    event_date_id: Mapped[BigInt] = mapped_column(
        BigIntId, ForeignKey('event_date.id', ondelete='CASCADE'), index=True, nullable=False
    )
    start_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    end_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    doors_open: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))

    event_date: Mapped['EventDateModel'] = relationship(
        'EventDateModel', back_populates='time_slots'
    )
    inventories: Mapped[List['InventoryModel']] = relationship(
        'InventoryModel',
        back_populates='time_slot',
        cascade='all, delete-orphan',
        passive_deletes=True,
    )
