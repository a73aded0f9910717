from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional
from functools import lru_cache

from config.constants import TransportMode, ResponseFormat


class GeneralSettings(BaseSettings):
    """Configuracion general"""

    ENVIRONMENT: str = Field(
        default="development",
        description="Entorno: development, staging, production"
    )
    LOG_LEVEL: str = Field(
        default="INFO",
        description="Nivel de logging: DEBUG, INFO, WARNING, ERROR, CRITICAL"
    )

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


class SendySettings(BaseSettings):
    """Configuracion de la instalacion de Sendy"""

    SENDY_API_KEY: str = Field(
        default="",
        description="API key de la instalacion (Settings > API key)"
    )
    SENDY_BASE_URL: str = Field(
        default="http://localhost",
        description="URL base de Sendy, sin slash final"
    )
    SENDY_LIST_ID: Optional[str] = Field(
        default=None,
        description="ID de lista por defecto (opcional)"
    )
    SENDY_TRANSPORT_MODE: TransportMode = Field(
        default=TransportMode.DIRECT_HTTP,
        description="Transporte HTTP: direct_http, legacy_curl_like"
    )
    SENDY_RESPONSE_FORMAT: ResponseFormat = Field(
        default=ResponseFormat.PLAIN_TEXT,
        description="Formato de respuesta del servicio: plain_text, html"
    )

    @field_validator("SENDY_BASE_URL")
    @classmethod
    def validate_base_url(cls, v):
        """Remover trailing slash de la URL"""
        if v.endswith("/"):
            return v.rstrip("/")
        return v

    @field_validator("SENDY_LIST_ID")
    @classmethod
    def empty_list_id_is_none(cls, v):
        """SENDY_LIST_ID= en el .env equivale a no configurarlo"""
        return v or None

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


class HTTPSettings(BaseSettings):
    """Configuracion del transporte HTTP"""

    HTTP_TIMEOUT: float = Field(
        default=45.0,
        gt=0,
        description="Timeout en segundos por request"
    )
    HTTP_MAX_REDIRECTS: int = Field(
        default=5,
        ge=0,
        description="Maximo de redirects a seguir (solo direct_http)"
    )
    HTTP_USER_AGENT: str = Field(
        default="sendy-api-client/0.1",
        min_length=1,
        description="User-Agent enviado a Sendy"
    )

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


class Settings(BaseSettings):
    """
    Clase principal que agrupa todas las configuraciones
    Uso: from config.settings import settings
         settings.sendy.SENDY_BASE_URL, settings.http.HTTP_TIMEOUT, etc
    """

    # Subconfigurations
    general: GeneralSettings = GeneralSettings()
    sendy: SendySettings = SendySettings()
    http: HTTPSettings = HTTPSettings()

    # Shortcuts para acceso directo
    @property
    def ENVIRONMENT(self) -> str:
        return self.general.ENVIRONMENT

    @property
    def LOG_LEVEL(self) -> str:
        return self.general.LOG_LEVEL

    @property
    def SENDY_BASE_URL(self) -> str:
        return self.sendy.SENDY_BASE_URL

    @property
    def SENDY_LIST_ID(self) -> Optional[str]:
        return self.sendy.SENDY_LIST_ID

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Singleton instance
@lru_cache()
def get_settings() -> Settings:
    """
    Obtener instancia singleton de Settings
    Uso: from config.settings import get_settings
         settings = get_settings()
    """
    return Settings()


# Instancia global (para imports directos)
settings = get_settings()
