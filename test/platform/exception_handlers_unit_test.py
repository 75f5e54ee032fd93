from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel
import pytest

from src.platform.exception.exception_handlers import register_exception_handlers
from src.platform.exception.exceptions import (
    AuthenticationError,
    ConflictError,
    DomainError,
    NotFoundError,
    TicketTypeProvisioningError,
)


class _Payload(BaseModel):
    quantity: int


@pytest.fixture
def error_client():
    app = FastAPI()
    register_exception_handlers(app)

    @app.get('/domain')
    async def domain():
        raise DomainError('Quantity cannot be negative')

    @app.get('/auth')
    async def auth():
        raise AuthenticationError()

    @app.get('/missing')
    async def missing():
        raise NotFoundError('Inventory not found')

    @app.get('/conflict')
    async def conflict():
        raise ConflictError('Time slot conflicts with an existing time slot')

    @app.get('/provisioning')
    async def provisioning():
        raise TicketTypeProvisioningError('UNIQUE constraint failed')

    @app.get('/boom')
    async def boom():
        raise RuntimeError('secret internals')

    @app.post('/validate')
    async def validate(payload: _Payload):
        return payload

    return TestClient(app, raise_server_exceptions=False)


@pytest.mark.unit
class TestExceptionHandlers:
    @pytest.mark.parametrize(
        'path,status_code,error',
        [
            ('/domain', 400, 'Quantity cannot be negative'),
            ('/auth', 401, 'Unauthorized'),
            ('/missing', 404, 'Inventory not found'),
            ('/conflict', 409, 'Time slot conflicts with an existing time slot'),
            ('/provisioning', 500, 'Could not create ticket type: UNIQUE constraint failed'),
        ],
    )
    def test_custom_errors_map_to_status_and_error_body(
        self, error_client, path, status_code, error
    ):
        response = error_client.get(path)

        assert response.status_code == status_code
        assert response.json() == {'error': error}

    def test_unhandled_error_hides_details(self, error_client):
        response = error_client.get('/boom')

        assert response.status_code == 500
        assert response.json() == {'error': 'Internal server error'}

    def test_validation_error_is_400_with_error_list(self, error_client):
        response = error_client.post('/validate', json={'quantity': 'many'})

        assert response.status_code == 400
        errors = response.json()['error']
        assert errors[0]['loc'] == ['body', 'quantity']

    @pytest.mark.parametrize('path', ['/domain', '/auth', '/missing', '/boom'])
    def test_error_response_mirrors_allowed_origin(self, error_client, path):
        response = error_client.get(path, headers={'Origin': 'http://localhost:3000'})

        assert response.headers['access-control-allow-origin'] == 'http://localhost:3000'
        assert response.headers['access-control-allow-credentials'] == 'true'

    def test_validation_error_carries_cors_headers(self, error_client):
        response = error_client.post(
            '/validate', json={'quantity': 'many'}, headers={'Origin': 'http://localhost:3000'}
        )

        assert response.status_code == 400
        assert response.headers['access-control-allow-origin'] == 'http://localhost:3000'

    def test_error_response_for_foreign_origin(self, error_client):
        response = error_client.get('/missing', headers={'Origin': 'https://evil.example.com'})

        assert response.status_code == 404
        assert response.headers['access-control-allow-origin'] == ''
