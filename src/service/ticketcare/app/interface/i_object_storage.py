from abc import ABC, abstractmethod

import attrs

from src.service.ticketcare.domain.enum.upload_access import UploadAccess


@attrs.frozen
class StoredObject:
    url: str
    pathname: str


class IObjectStorage(ABC):
    @abstractmethod
    async def put_object(
        self, *, filename: str, content: bytes, content_type: str, access: UploadAccess
    ) -> StoredObject:
        """Store the bytes and return a URL the caller can hand to the browser."""
        pass
