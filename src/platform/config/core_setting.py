from pathlib import Path
from typing import List, Optional

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')

_LOCAL_DASHBOARD_ORIGINS = [
    f'http://{host}:{port}' for host in ('localhost', '127.0.0.1') for port in (3000, 3001, 3002)
]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'TicketCare API'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # Security
    SECRET_KEY: SecretStr = SecretStr('test_secret_key_change_in_production')
    ALGORITHM: str = 'HS256'

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = _LOCAL_DASHBOARD_ORIGINS
    APP_URL: Optional[str] = None  # organizer dashboard
    WEB_URL: Optional[str] = None  # storefront

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and not v.startswith('['):
            return [i.strip() for i in v.split(',') if i.strip()]
        elif isinstance(v, list):
            return v
        return []

    @property
    def ALLOWED_ORIGINS(self) -> List[str]:
        extra = [url.rstrip('/') for url in (self.APP_URL, self.WEB_URL) if url]
        return [*self.BACKEND_CORS_ORIGINS, *extra]

    # PostgreSQL
    POSTGRES_SERVER: str = 'localhost'
    POSTGRES_USER: str = 'postgres'
    POSTGRES_PASSWORD: SecretStr = SecretStr('postgres')
    POSTGRES_DB: str = 'ticketcare'
    POSTGRES_PORT: int = 5432
    DATABASE_URL: Optional[str] = None  # full override, e.g. sqlite+aiosqlite:///./local.db

    # Connection pool
    DB_POOL_SIZE: int = 20
    DB_MAX_OVERFLOW: int = 20
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 3600

    @property
    def DATABASE_URL_ASYNC(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        password = self.POSTGRES_PASSWORD.get_secret_value()
        return (
            f'postgresql+asyncpg://{self.POSTGRES_USER}:{password}'
            f'@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}'
        )

    # Object storage (S3-compatible, Backblaze B2 by default)
    STORAGE_BUCKET_NAME: str = 'ticketcare-uploads'
    STORAGE_REGION: str = 'us-west-004'
    STORAGE_ENDPOINT_URL: Optional[str] = None
    STORAGE_ACCESS_KEY_ID: str = ''
    STORAGE_SECRET_ACCESS_KEY: SecretStr = SecretStr('')
    STORAGE_PRESIGNED_URL_EXPIRES: int = 3600  # seconds

    @property
    def STORAGE_ENDPOINT(self) -> str:
        return self.STORAGE_ENDPOINT_URL or f'https://s3.{self.STORAGE_REGION}.backblazeb2.com'

    # Observability
    SERVICE_NAME: str = 'ticketcare-api'
    OTEL_EXPORTER_OTLP_ENDPOINT: Optional[str] = None


settings = Settings()  # type: ignore
