from unittest.mock import AsyncMock, MagicMock

from dependency_injector import providers
from fastapi.testclient import TestClient
import pytest

from src.platform.config.di import container
from src.service.ticketcare.app.interface.i_object_storage import StoredObject
from src.service.ticketcare.domain.enum.upload_access import UploadAccess
from src.service.ticketcare.driving_adapter.http_controller.auth.jwt_auth import JwtAuth
from test.route_constant import ALLOWED_ORIGIN, UPLOAD


@pytest.fixture
def fake_storage():
    storage = MagicMock()
    storage.put_object = AsyncMock(
        return_value=StoredObject(
            url='https://ticketcare-uploads.s3.us-west-004.backblazeb2.com/1-poster.png',
            pathname='1-poster.png',
        )
    )
    with container.object_storage.override(providers.Object(storage)):
        yield storage


@pytest.fixture
def auth_headers():
    token = JwtAuth().create_jwt_token(user_id='usr_organizer', email='org@example.com')
    return {'Authorization': f'Bearer {token}', 'Origin': ALLOWED_ORIGIN}


class TestUpload:
    def test_requires_session(self, client: TestClient, fake_storage):
        response = client.post(UPLOAD, files={'file': ('poster.png', b'\x89PNG', 'image/png')})

        assert response.status_code == 401
        assert response.json() == {'error': 'Unauthorized'}
        fake_storage.put_object.assert_not_awaited()

    def test_unauthorized_response_carries_cors_headers(self, client: TestClient, fake_storage):
        response = client.post(
            UPLOAD,
            headers={'Origin': ALLOWED_ORIGIN},
            files={'file': ('poster.png', b'\x89PNG', 'image/png')},
        )

        assert response.status_code == 401
        assert response.headers['access-control-allow-origin'] == ALLOWED_ORIGIN

    def test_uploads_public_file(self, client: TestClient, fake_storage, auth_headers):
        response = client.post(
            UPLOAD,
            headers=auth_headers,
            files={'file': ('poster.png', b'\x89PNG', 'image/png')},
            data={'access': 'public'},
        )

        assert response.status_code == 200
        assert response.json() == {
            'success': True,
            'url': 'https://ticketcare-uploads.s3.us-west-004.backblazeb2.com/1-poster.png',
            'pathname': '1-poster.png',
        }
        assert response.headers['access-control-allow-origin'] == ALLOWED_ORIGIN
        fake_storage.put_object.assert_awaited_once_with(
            filename='poster.png',
            content=b'\x89PNG',
            content_type='image/png',
            access=UploadAccess.PUBLIC,
        )

    def test_private_by_default(self, client: TestClient, fake_storage, auth_headers):
        client.post(
            UPLOAD, headers=auth_headers, files={'file': ('invoice.pdf', b'%PDF', 'application/pdf')}
        )

        assert fake_storage.put_object.call_args.kwargs['access'] is UploadAccess.PRIVATE

    def test_missing_file(self, client: TestClient, fake_storage, auth_headers):
        response = client.post(UPLOAD, headers=auth_headers, data={'access': 'public'})

        assert response.status_code == 400
        assert response.json() == {'error': 'File is required'}
