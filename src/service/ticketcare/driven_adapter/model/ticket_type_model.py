from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.platform.database.orm_db_setting import Base
from src.platform.types.big_int_types import BigInt, BigIntId

if TYPE_CHECKING:
    from src.service.ticketcare.driven_adapter.model.event_model import EventModel
    from src.service.ticketcare.driven_adapter.model.inventory_model import InventoryModel


class TicketTypeModel(Base):
    __tablename__ = 'ticket_type'

    id: Mapped[BigInt] = mapped_column(BigIntId, primary_key=True, autoincrement=True)
    event_id: Mapped[BigInt] = mapped_column(
        BigIntId, ForeignKey('event.id'), index=True, nullable=False
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    max_per_order: Mapped[int] = mapped_column(Integer, nullable=False)
    min_per_order: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    sale_start_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    sale_end_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    event: Mapped['EventModel'] = relationship('EventModel', back_populates='ticket_types')
    inventories: Mapped[List['InventoryModel']] = relationship(
        'InventoryModel', back_populates='ticket_type'
    )
