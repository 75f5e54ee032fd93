"""
S3-compatible object storage (Backblaze B2 by default)

boto3 is blocking, so each call is pushed to a worker thread.
"""

import time
from typing import Any, Optional

import anyio.to_thread
import boto3
from botocore.exceptions import BotoCoreError, ClientError

from src.platform.config.core_setting import Settings
from src.platform.exception.exceptions import StorageError
from src.platform.logging.loguru_io import Logger
from src.service.ticketcare.app.interface.i_object_storage import IObjectStorage, StoredObject
from src.service.ticketcare.domain.enum.upload_access import UploadAccess


class S3ObjectStorageImpl(IObjectStorage):
    def __init__(self, *, settings: Settings, client: Optional[Any] = None) -> None:
        self.bucket_name = settings.STORAGE_BUCKET_NAME
        self.region = settings.STORAGE_REGION
        self.presigned_url_expires = settings.STORAGE_PRESIGNED_URL_EXPIRES
        self.client = client or boto3.client(
            's3',
            endpoint_url=settings.STORAGE_ENDPOINT,
            region_name=settings.STORAGE_REGION,
            aws_access_key_id=settings.STORAGE_ACCESS_KEY_ID,
            aws_secret_access_key=settings.STORAGE_SECRET_ACCESS_KEY.get_secret_value(),
        )

    @staticmethod
    def build_key(filename: str) -> str:
        return f'{int(time.time() * 1000)}-{filename}'

    def public_url(self, key: str) -> str:
        return f'https://{self.bucket_name}.s3.{self.region}.backblazeb2.com/{key}'

    @Logger.io
    async def put_object(
        self, *, filename: str, content: bytes, content_type: str, access: UploadAccess
    ) -> StoredObject:
        key = self.build_key(filename)

        try:
            await anyio.to_thread.run_sync(
                lambda: self.client.put_object(
                    Bucket=self.bucket_name,
                    Key=key,
                    Body=content,
                    ContentType=content_type,
                )
            )

            if access is UploadAccess.PUBLIC:
                url = self.public_url(key)
            else:
                url = await anyio.to_thread.run_sync(
                    lambda: self.client.generate_presigned_url(
                        'get_object',
                        Params={'Bucket': self.bucket_name, 'Key': key},
                        ExpiresIn=self.presigned_url_expires,
                    )
                )
        except (BotoCoreError, ClientError) as e:
            Logger.base.error(f'❌ [UPLOAD] Failed to store {key} in {self.bucket_name}: {e}')
            raise StorageError() from e

        Logger.base.info(f'✅ [UPLOAD] Stored {key} ({access.value})')
        return StoredObject(url=url, pathname=key)
