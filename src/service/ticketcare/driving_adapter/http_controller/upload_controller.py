from typing import Dict, Optional

from fastapi import APIRouter, Depends, File, Form, Header, UploadFile, status
from fastapi.responses import ORJSONResponse

from src.platform.logging.loguru_io import Logger
from src.service.ticketcare.app.command.upload_file_use_case import UploadFileUseCase
from src.service.ticketcare.domain.enum.upload_access import UploadAccess
from src.service.ticketcare.driving_adapter.http_controller.auth.session_auth import (
    require_session,
)
from src.service.ticketcare.driving_adapter.http_controller.cors import cors_json, preflight


router = APIRouter()


@router.post('', status_code=status.HTTP_200_OK)
@Logger.io
async def upload_file(
    session: Dict = Depends(require_session),
    file: Optional[UploadFile] = File(None),
    access: UploadAccess = Form(UploadAccess.PRIVATE),
    origin: Optional[str] = Header(None),
    use_case: UploadFileUseCase = Depends(UploadFileUseCase.depends),
) -> ORJSONResponse:
    """Multipart ``file`` plus ``access``; private files come back as a presigned URL."""
    stored = await use_case.upload(
        filename=file.filename if file else None,
        content=await file.read() if file else b'',
        content_type=file.content_type if file else None,
        access=access,
    )

    Logger.base.info(f'📤 [UPLOAD] {session["sub"]} uploaded {stored.pathname}')
    return cors_json(
        {'success': True, 'url': stored.url, 'pathname': stored.pathname}, origin=origin
    )


@router.options('')
async def upload_preflight(origin: Optional[str] = Header(None)) -> ORJSONResponse:
    return preflight(origin)
