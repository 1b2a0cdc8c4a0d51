"""Web front end settings (uvicorn binding and page metadata)."""

from pydantic import Field
from pydantic_settings import BaseSettings

from mvcmovie.settings.base import SECTION_CONFIG


class APISettings(BaseSettings):
    """HTTP server configuration.

    Attributes:
        host: Interface uvicorn binds to. Loopback by default.
        port: TCP port.
        reload: Restart on code changes (development only).
        title: Name shown in page titles and the OpenAPI schema.
        version: Reported by /health and the OpenAPI schema.
    """

    model_config = SECTION_CONFIG

    host: str = Field(default="127.0.0.1", alias="API_HOST")
    port: int = Field(default=8000, ge=1, le=65535, alias="API_PORT")
    reload: bool = Field(default=False, alias="API_RELOAD")
    title: str = Field(default="MvcMovie", alias="API_TITLE")
    version: str = Field(default="1.0.0", alias="API_VERSION")
