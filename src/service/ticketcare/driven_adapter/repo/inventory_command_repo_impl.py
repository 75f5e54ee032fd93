from typing import List, Optional

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.platform.types.big_int_types import BigInt
from src.service.ticketcare.app.interface.i_inventory_command_repo import IInventoryCommandRepo
from src.service.ticketcare.domain.entity.inventory_entity import InventoryEntity
from src.service.ticketcare.driven_adapter.model.inventory_model import InventoryModel
from src.service.ticketcare.driven_adapter.model.ticket_model import TicketModel


class InventoryCommandRepoImpl(IInventoryCommandRepo):
    def __init__(self, *, session: AsyncSession):
        self.session = session

    @Logger.io
    async def create_many(
        self, *, ticket_type_id: BigInt, time_slot_ids: List[BigInt], quantity: int
    ) -> List[InventoryEntity]:
        inventory_models = [
            InventoryModel(
                ticket_type_id=ticket_type_id,
                time_slot_id=time_slot_id,
                quantity=quantity,
            )
            for time_slot_id in time_slot_ids
        ]
        self.session.add_all(inventory_models)
        await self.session.flush()

        return [self._model_to_entity(model) for model in inventory_models]

    @Logger.io
    async def get(self, *, inventory_id: BigInt) -> Optional[InventoryEntity]:
        inventory_model = await self.session.get(InventoryModel, inventory_id)
        return self._model_to_entity(inventory_model) if inventory_model else None

    @Logger.io
    async def count_tickets_sold(self, *, inventory: InventoryEntity) -> int:
        result = await self.session.execute(
            select(func.count(TicketModel.id)).where(
                TicketModel.ticket_type_id == inventory.ticket_type_id,
                TicketModel.time_slot_id == inventory.time_slot_id,
            )
        )
        return result.scalar_one()

    @Logger.io
    async def update_quantity(self, *, inventory_id: BigInt, quantity: int) -> None:
        await self.session.execute(
            update(InventoryModel)
            .where(InventoryModel.id == inventory_id)
            .values(quantity=quantity)
        )

    def _model_to_entity(self, inventory_model: InventoryModel) -> InventoryEntity:
        return InventoryEntity(
            id=BigInt(inventory_model.id),
            ticket_type_id=BigInt(inventory_model.ticket_type_id),
            time_slot_id=BigInt(inventory_model.time_slot_id),
            quantity=inventory_model.quantity,
        )
