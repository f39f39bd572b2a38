"""Configuration for the HTTP results reporter."""

from pydantic import BaseModel, SecretStr


class HttpReporterConfig(BaseModel):
    """Configuration for the HTTP results reporter."""

    api_base_url: str
    token: SecretStr | None = None
    path: str = "/results"
    timeout: float = 60
