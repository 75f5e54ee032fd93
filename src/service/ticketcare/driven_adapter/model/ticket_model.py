from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.platform.database.orm_db_setting import Base
from src.platform.types.big_int_types import BigInt, BigIntId

if TYPE_CHECKING:
    from src.service.ticketcare.driven_adapter.model.event_model import EventModel
    from src.service.ticketcare.driven_adapter.model.order_model import OrderModel
    from src.service.ticketcare.driven_adapter.model.ticket_type_model import TicketTypeModel
    from src.service.ticketcare.driven_adapter.model.time_slot_model import TimeSlotModel


class TicketModel(Base):
    __tablename__ = 'ticket'

    id: Mapped[BigInt] = mapped_column(BigIntId, primary_key=True, autoincrement=True)
    order_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('order.id'), index=True, nullable=False
    )
    event_id: Mapped[BigInt] = mapped_column(
        BigIntId, ForeignKey('event.id'), index=True, nullable=False
    )
    ticket_type_id: Mapped[BigInt] = mapped_column(
        BigIntId, ForeignKey('ticket_type.id'), index=True, nullable=False
    )
    time_slot_id: Mapped[Optional[BigInt]] = mapped_column(
        BigIntId, ForeignKey('time_slot.id', ondelete='SET NULL'), index=True
    )
    status: Mapped[str] = mapped_column(String(20), default='valid', nullable=False)
    qr_code: Mapped[Optional[str]] = mapped_column(String(255))
    owner_name: Mapped[Optional[str]] = mapped_column(String(255))
    owner_email: Mapped[Optional[str]] = mapped_column(String(255))
    purchase_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    order: Mapped['OrderModel'] = relationship('OrderModel', back_populates='tickets')
    event: Mapped['EventModel'] = relationship('EventModel')
    ticket_type: Mapped['TicketTypeModel'] = relationship('TicketTypeModel')
    time_slot: Mapped[Optional['TimeSlotModel']] = relationship('TimeSlotModel')
