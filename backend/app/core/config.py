"""Carga de configuración de la aplicación.

Usa `pydantic-settings` para leer valores desde `.env` o variables de
entorno. Cada campo lleva un comentario corto con su propósito.
"""

from functools import lru_cache
from typing import Annotated, Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Contenedor tipado para todas las opciones configurables."""

    app_name: str = "Jobs API"
    environment: str = "development"

    # Dirección y puerto donde escucha uvicorn
    host: str = "0.0.0.0"
    port: int = 8080

    # Nivel del logger raíz (DEBUG, INFO, WARNING, ...)
    log_level: str = "INFO"

    # /docs, /redoc y /openapi.json colisionan con GET /{id}; apagados por defecto
    docs_enabled: bool = False

    # CORS
    allowed_origins: Annotated[list[str], NoDecode] = ["*"]
    allow_credentials: bool = False

    # Le indicamos a Pydantic que lea automáticamente las variables de entorno
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _split_origins(cls, value: Any) -> Any:
        # Accept comma separated `ALLOWED_ORIGINS` env value as a string
        if isinstance(value, str):
            return [s.strip() for s in value.split(",") if s.strip()]
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.strip().upper()


@lru_cache
def get_settings() -> Settings:
    """Crea (y memoriza) la configuración de forma perezosa.

    Usamos `lru_cache` para que sólo se construya una instancia por proceso,
    evitando relecturas repetidas de `.env`.
    """

    return Settings()
