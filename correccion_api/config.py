"""
Configuración del backend de corrección automática.

Todos los valores se leen de variables de entorno o del archivo .env.
"""
from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ROOT_ADMIN_PASSWORD = "changeme123"


class Settings(BaseSettings):
    """Settings de la aplicación (pydantic-settings)."""

    # Base de datos: obligatoria
    DATABASE_URL: str
    AUTO_CREATE_TABLES: bool = True

    # JWT: la clave es obligatoria, los tokens los emite el servicio de autenticación
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # Servicio
    APP_NAME: str = "Correccion API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    ALLOWED_ORIGINS: str = "http://localhost:5173"

    # Administrador principal, no puede eliminarse
    ROOT_ADMIN_USERNAME: str = "admin"
    ROOT_ADMIN_PASSWORD: str = DEFAULT_ROOT_ADMIN_PASSWORD

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @property
    def allowed_origins_list(self) -> List[str]:
        """Orígenes CORS separados por coma."""
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    def insecure_settings(self) -> List[str]:
        """
        Revisar valores por defecto que no deberían llegar a producción.
        Devuelve una lista de advertencias; vacía si todo está configurado.
        """
        warnings = []
        if self.ROOT_ADMIN_PASSWORD == DEFAULT_ROOT_ADMIN_PASSWORD:
            warnings.append("ROOT_ADMIN_PASSWORD usa el valor por defecto")
        if len(self.SECRET_KEY) < 32:
            warnings.append("SECRET_KEY tiene menos de 32 caracteres")
        if "*" in self.allowed_origins_list:
            warnings.append("ALLOWED_ORIGINS permite cualquier origen")
        return warnings


@lru_cache
def get_settings() -> Settings:
    """Settings leídos del entorno, cacheados para todo el proceso."""
    return Settings()
