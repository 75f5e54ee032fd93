"""
Session Token Verification

Accounts and sessions are issued elsewhere; this service only checks that a
bearer token is a valid, unexpired session signed with the shared secret.
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

from fastapi import Request
import jwt

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import AuthenticationError


class JwtAuth:
    def __init__(self) -> None:
        self.secret = settings.SECRET_KEY.get_secret_value()
        self.algorithm = settings.ALGORITHM
        self.token_expire_days = 7

    def create_jwt_token(self, *, user_id: str, email: Optional[str] = None) -> str:
        """Sign a session token; used by tooling and tests that act as the session issuer."""
        payload = {
            'sub': user_id,
            'exp': datetime.now(timezone.utc) + timedelta(days=self.token_expire_days),
            'iat': datetime.now(timezone.utc),
            'user_id': user_id,
            'email': email,
        }

        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode_jwt_token(self, token: str) -> Dict:
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
            return payload
        except jwt.PyJWTError:
            raise AuthenticationError()

    def get_session_from_request(self, request: Request) -> Dict:
        """Decoded session claims from ``Authorization: Bearer <token>``."""
        authorization = request.headers.get('authorization')
        if not authorization:
            raise AuthenticationError()

        scheme, _, token = authorization.partition(' ')
        if scheme.lower() != 'bearer' or not token:
            raise AuthenticationError()

        payload = self.decode_jwt_token(token)
        if not payload.get('sub'):
            raise AuthenticationError()

        return payload
