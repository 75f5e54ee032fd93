from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.platform.database.orm_db_setting import Base

if TYPE_CHECKING:
    from src.service.ticketcare.driven_adapter.model.customer_model import CustomerModel
    from src.service.ticketcare.driven_adapter.model.ticket_model import TicketModel
    from src.service.ticketcare.driven_adapter.model.user_model import UserModel


class OrderModel(Base):
    __tablename__ = 'order'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    customer_id: Mapped[Optional[str]] = mapped_column(
        String(64), ForeignKey('customer.id'), index=True
    )
    user_id: Mapped[Optional[str]] = mapped_column(String(64), ForeignKey('user.id'), index=True)
    status: Mapped[str] = mapped_column(String(20), default='pending', nullable=False)
    payment_method: Mapped[Optional[str]] = mapped_column(String(50))
    payment_status: Mapped[Optional[str]] = mapped_column(String(20))
    transaction_id: Mapped[Optional[str]] = mapped_column(String(255))
    total_amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    ordered_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), index=True, nullable=False
    )

    customer: Mapped[Optional['CustomerModel']] = relationship(
        'CustomerModel', back_populates='orders'
    )
    user: Mapped[Optional['UserModel']] = relationship('UserModel', back_populates='orders')
    tickets: Mapped[List['TicketModel']] = relationship('TicketModel', back_populates='order')
