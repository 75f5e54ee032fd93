from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.platform.database.orm_db_setting import Base
from src.platform.types.big_int_types import BigInt, BigIntId

if TYPE_CHECKING:
    from src.service.ticketcare.driven_adapter.model.ticket_type_model import TicketTypeModel
    from src.service.ticketcare.driven_adapter.model.time_slot_model import TimeSlotModel


class InventoryModel(Base):
    __tablename__ = 'inventory'
    __table_args__ = (
        UniqueConstraint('ticket_type_id', 'time_slot_id', name='uq_inventory_ticket_type_slot'),
        CheckConstraint('quantity >= 0', name='ck_inventory_quantity_non_negative'),
    )

    id: Mapped[BigInt] = mapped_column(BigIntId, primary_key=True, autoincrement=True)
    ticket_type_id: Mapped[BigInt] = mapped_column(
        BigIntId, ForeignKey('ticket_type.id', ondelete='CASCADE'), index=True, nullable=False
    )
    time_slot_id: Mapped[BigInt] = mapped_column(
        BigIntId, ForeignKey('time_slot.id', ondelete='CASCADE'), index=True, nullable=False
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)

    ticket_type: Mapped['TicketTypeModel'] = relationship(
        'TicketTypeModel', back_populates='inventories'
    )
    time_slot: Mapped['TimeSlotModel'] = relationship('TimeSlotModel', back_populates='inventories')
