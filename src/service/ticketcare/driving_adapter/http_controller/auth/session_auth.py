from typing import Dict

from dependency_injector.wiring import Provide, inject
from fastapi import Depends, Request

from src.platform.config.di import Container
from src.service.ticketcare.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


@inject
async def require_session(
    request: Request,
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> Dict:
    """Bearer session claims, or AuthenticationError (401 'Unauthorized')."""
    return jwt_auth.get_session_from_request(request)
