"""HTTP server infrastructure settings."""

from typing import Annotated, Any, List

from pydantic import Field, field_validator
from pydantic_settings import NoDecode

from infrastructure.configuration.base import InfrastructureSettings, split_list_value


class ServerSettings(InfrastructureSettings):
    """HTTP application runtime configuration.

    Environment Variables:
        HOST: Interface the HTTP server binds to
        PORT: Port the HTTP server listens on
        CORS_ORIGINS: Origins allowed by CORS, as a JSON list or comma separated

    Example:
        ```python
        from infrastructure.services import get_settings

        origins = get_settings().server.CORS_ORIGINS
        ```
    """

    HOST: str = Field(default="0.0.0.0", alias="HOST")
    PORT: int = Field(default=8000, alias="PORT")
    CORS_ORIGINS: Annotated[List[str], NoDecode] = Field(
        default_factory=list, alias="CORS_ORIGINS"
    )

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def split_origins(cls, v: Any) -> Any:
        return split_list_value(v)
