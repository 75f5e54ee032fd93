from datetime import datetime, timedelta, timezone

import jwt
import pytest
from starlette.requests import Request

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import AuthenticationError
from src.service.ticketcare.driving_adapter.http_controller.auth.jwt_auth import JwtAuth


def _request(authorization=None) -> Request:
    headers = []
    if authorization is not None:
        headers.append((b'authorization', authorization.encode()))
    return Request({'type': 'http', 'method': 'POST', 'path': '/api/upload', 'headers': headers})


@pytest.fixture
def auth():
    return JwtAuth()


@pytest.mark.unit
class TestJwtAuth:
    def test_issued_token_decodes(self, auth):
        token = auth.create_jwt_token(user_id='user_42', email='ana@example.com')

        payload = auth.get_session_from_request(_request(f'Bearer {token}'))

        assert payload['sub'] == 'user_42'
        assert payload['email'] == 'ana@example.com'

    def test_scheme_is_case_insensitive(self, auth):
        token = auth.create_jwt_token(user_id='user_42')

        assert auth.get_session_from_request(_request(f'bearer {token}'))['sub'] == 'user_42'

    @pytest.mark.parametrize(
        'authorization',
        [None, '', 'Basic dXNlcjpwYXNz', 'Bearer', 'Bearer not-a-jwt'],
    )
    def test_rejects_missing_or_malformed_header(self, auth, authorization):
        with pytest.raises(AuthenticationError):
            auth.get_session_from_request(_request(authorization))

    def test_rejects_foreign_signature(self, auth):
        token = jwt.encode({'sub': 'user_42'}, 'some-other-secret', algorithm='HS256')

        with pytest.raises(AuthenticationError):
            auth.decode_jwt_token(token)

    def test_rejects_expired_token(self, auth):
        token = jwt.encode(
            {'sub': 'user_42', 'exp': datetime.now(timezone.utc) - timedelta(minutes=1)},
            settings.SECRET_KEY.get_secret_value(),
            algorithm=settings.ALGORITHM,
        )

        with pytest.raises(AuthenticationError):
            auth.decode_jwt_token(token)

    def test_rejects_token_without_subject(self, auth):
        token = jwt.encode(
            {'email': 'ana@example.com'},
            settings.SECRET_KEY.get_secret_value(),
            algorithm=settings.ALGORITHM,
        )

        with pytest.raises(AuthenticationError) as exc:
            auth.get_session_from_request(_request(f'Bearer {token}'))

        assert exc.value.status_code == 401
