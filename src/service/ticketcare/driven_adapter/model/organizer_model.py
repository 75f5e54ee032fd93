from decimal import Decimal
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.platform.database.orm_db_setting import Base

if TYPE_CHECKING:
    from src.service.ticketcare.driven_adapter.model.event_model import EventModel


class OrganizerModel(Base):
    __tablename__ = 'organizer'

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    phone: Mapped[Optional[str]] = mapped_column(String(50))
    commission_rate: Mapped[Decimal] = mapped_column(
        Numeric(5, 2), nullable=False, default=Decimal('0')
    )

    events: Mapped[List['EventModel']] = relationship('EventModel', back_populates='organizer')
