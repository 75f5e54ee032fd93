from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.platform.types.big_int_types import BigInt
from src.platform.types.utc_datetime import ensure_utc
from src.service.ticketcare.app.interface.i_time_slot_command_repo import ITimeSlotCommandRepo
from src.service.ticketcare.domain.entity.time_slot_entity import TimeSlotEntity
from src.service.ticketcare.driven_adapter.model.event_date_model import EventDateModel
from src.service.ticketcare.driven_adapter.model.event_model import EventModel
from src.service.ticketcare.driven_adapter.model.time_slot_model import TimeSlotModel


class TimeSlotCommandRepoImpl(ITimeSlotCommandRepo):
    def __init__(self, *, session: AsyncSession):
        self.session = session

    @Logger.io
    async def get_event_slug_for_date(self, *, event_date_id: BigInt) -> Optional[str]:
        result = await self.session.execute(
            select(EventModel.slug)
            .join(EventDateModel, EventDateModel.event_id == EventModel.id)
            .where(EventDateModel.id == event_date_id)
        )
        return result.scalar_one_or_none()

    @Logger.io
    async def get_event_slug_for_slot(self, *, time_slot_id: BigInt) -> Optional[str]:
        result = await self.session.execute(
            select(EventModel.slug)
            .join(EventDateModel, EventDateModel.event_id == EventModel.id)
            .join(TimeSlotModel, TimeSlotModel.event_date_id == EventDateModel.id)
            .where(TimeSlotModel.id == time_slot_id)
        )
        return result.scalar_one_or_none()

    @Logger.io
    async def list_for_event_date(self, *, event_date_id: BigInt) -> List[TimeSlotEntity]:
        result = await self.session.execute(
            select(TimeSlotModel)
            .where(TimeSlotModel.event_date_id == event_date_id)
            .order_by(TimeSlotModel.start_time.asc())
        )
        return [self._model_to_entity(model) for model in result.scalars().all()]

    @Logger.io
    async def create(self, *, time_slot: TimeSlotEntity) -> TimeSlotEntity:
        time_slot_model = TimeSlotModel(
            event_date_id=time_slot.event_date_id,
            start_time=time_slot.start_time,
            end_time=time_slot.end_time,
            doors_open=time_slot.doors_open,
        )
        self.session.add(time_slot_model)
        await self.session.flush()

        return self._model_to_entity(time_slot_model)

    @Logger.io
    async def delete(self, *, time_slot_id: BigInt) -> None:
        await self.session.execute(delete(TimeSlotModel).where(TimeSlotModel.id == time_slot_id))

    def _model_to_entity(self, time_slot_model: TimeSlotModel) -> TimeSlotEntity:
        return TimeSlotEntity(
            id=BigInt(time_slot_model.id),
            event_date_id=BigInt(time_slot_model.event_date_id),
            start_time=ensure_utc(time_slot_model.start_time),
            end_time=ensure_utc(time_slot_model.end_time),
            doors_open=ensure_utc(time_slot_model.doors_open),
        )
