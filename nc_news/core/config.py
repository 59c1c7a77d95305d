import logging
import os
from typing import Annotated, List, Union, Any, Optional
from pydantic import Field, field_validator, SecretStr, computed_field, ValidationInfo
from pydantic_settings import BaseSettings, NoDecode
from google.cloud import secretmanager
from google.api_core.exceptions import NotFound

logger = logging.getLogger(__name__)

SECRET_IDS = ['DATABASE_URL', 'POSTGRES_SERVER', 'POSTGRES_USER', 'POSTGRES_PASSWORD', 'POSTGRES_DB']


def get_secrets() -> Optional[dict[str, str]]:
    if os.getenv('GOOGLE_CLOUD_PROJECT'):
        client = secretmanager.SecretManagerServiceClient()
        project_id = os.getenv('GOOGLE_CLOUD_PROJECT')

        secrets = {}
        for secret_id in SECRET_IDS:
            try:
                name = f"projects/{project_id}/secrets/{secret_id}/versions/latest"
                response = client.access_secret_version(request={"name": name})
                secrets[secret_id] = response.payload.data.decode("UTF-8")
            except NotFound:
                logger.warning(f"Secret {secret_id} not found in GCP Secret Manager.")
        return secrets
    else:
        return None


class Settings(BaseSettings):
    PROJECT_NAME: str = "NC News"
    ENVIRONMENT: str = Field(default="development")
    LOG_LEVEL: str = Field(default="INFO")

    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = [
        "http://localhost",
        "http://localhost:8080",
    ]

    GOOGLE_CLOUD_PROJECT: Optional[str] = None

    POSTGRES_SERVER: str = "localhost"
    POSTGRES_USER: str = "ncnews"
    POSTGRES_PASSWORD: SecretStr = Field(default=SecretStr(""))
    POSTGRES_DB: str = "nc_news"
    POSTGRES_PORT: int = Field(default=5432)
    DATABASE_URL: Optional[str] = Field(default=None, validate_default=True)
    SQL_ECHO: bool = False

    @field_validator("DATABASE_URL", mode='before')
    @classmethod
    def assemble_db_connection(cls, v: Optional[str], info: ValidationInfo) -> Any:
        if isinstance(v, str) and v:
            return v
        password = info.data.get("POSTGRES_PASSWORD")
        if isinstance(password, SecretStr):
            password = password.get_secret_value()
        auth = info.data.get("POSTGRES_USER")
        if password:
            auth = f"{auth}:{password}"
        return (
            f"postgresql://{auth}@{info.data.get('POSTGRES_SERVER')}"
            f":{info.data.get('POSTGRES_PORT', 5432)}/{info.data.get('POSTGRES_DB') or ''}"
        )

    @field_validator("BACKEND_CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> Union[List[str], str]:
        if isinstance(v, str):
            try:
                import json
                return json.loads(v)
            except json.JSONDecodeError:
                return [i.strip() for i in v.split(",") if i.strip()]
        return v

    @computed_field
    @property
    def is_sqlite(self) -> bool:
        return str(self.DATABASE_URL).startswith("sqlite")

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

    @classmethod
    def from_gcp_secrets(cls) -> 'Settings':
        secrets = get_secrets()
        if secrets:
            return cls(**secrets)
        return cls()


def get_settings() -> Settings:
    env = os.getenv("ENVIRONMENT", "development")
    if env == "production":
        return Settings.from_gcp_secrets()
    return Settings()


settings = get_settings()

logging.basicConfig(level=settings.LOG_LEVEL.upper())


def log_settings(settings: Settings) -> None:
    logger.info("Settings loaded:")
    for field, value in settings.model_dump().items():
        if isinstance(value, SecretStr):
            logger.info(f"{field}: [REDACTED]")
        elif field == "DATABASE_URL" and value and "@" in value:
            logger.info(f"{field}: [REDACTED]@{value.rsplit('@', 1)[1]}")
        else:
            logger.info(f"{field}: {value}")


log_settings(settings)
