from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.ticketcare.app.interface.i_object_storage import IObjectStorage, StoredObject
from src.service.ticketcare.domain.enum.upload_access import UploadAccess


class UploadFileUseCase:
    def __init__(self, object_storage: IObjectStorage) -> None:
        self.object_storage = object_storage

    @classmethod
    @inject
    def depends(
        cls,
        object_storage: IObjectStorage = Depends(Provide[Container.object_storage]),
    ) -> Self:
        return cls(object_storage=object_storage)

    @Logger.io
    async def upload(
        self,
        *,
        filename: Optional[str],
        content: bytes,
        content_type: Optional[str],
        access: UploadAccess = UploadAccess.PRIVATE,
    ) -> StoredObject:
        if not filename:
            raise DomainError('File is required')

        return await self.object_storage.put_object(
            filename=filename,
            content=content,
            content_type=content_type or 'application/octet-stream',
            access=access,
        )
