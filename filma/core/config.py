# filma/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, SecretStr
from typing import List, Optional
from functools import lru_cache

NAMING_CONVENTION: dict[str, str] = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_N_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class DataBaseConfig(BaseSettings):
    # Lit directement DB_HOST, DB_USER, ... sans préfixe imbriqué
    DB_HOST: str = Field("localhost", description="Database host")
    DB_PORT: int = Field(5432, description="Database port")
    DB_NAME: str = Field("filma", description="Database name")
    DB_USER: str = Field("postgres", description="Database user")
    DB_PASSWORD: SecretStr = Field(SecretStr(""), description="Database password")
    DB_DRIVER: str = Field("postgresql+asyncpg", description="SQLAlchemy async dialect+driver")
    DB_URL: Optional[str] = Field(None, description="Full database URL, overrides the DB_* parts")
    DB_ECHO: bool = Field(False, description="Enable SQL echo")
    DB_POOL_SIZE: int = Field(5, description="Database pool size")
    DB_MAX_OVERFLOW: int = Field(10, description="Database max overflow")
    DB_CREATE_TABLES: bool = Field(False, description="Create missing tables on startup")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def DATABASE_URL(self) -> str:
        if self.DB_URL:
            return self.DB_URL
        password = self.DB_PASSWORD.get_secret_value()
        credentials = f"{self.DB_USER}:{password}" if password else self.DB_USER
        return f"{self.DB_DRIVER}://{credentials}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"


class Settings(BaseSettings):
    app_name: str = Field("Filma API", description="Application name")
    app_version: str = Field("1.0.0", description="Application version")
    debug: bool = Field(False, description="Debug mode")
    host: str = Field("0.0.0.0", description="Bind address")
    port: int = Field(3000, description="Listen port")
    docs_url: Optional[str] = Field("/", description="Swagger UI path, None disables it")
    cors_origins: List[str] = Field(
        default_factory=lambda: ["*"],
        description="CORS origins"
    )

    db: DataBaseConfig = Field(default_factory=DataBaseConfig)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Instance des paramètres, mise en cache pour le processus"""
    return Settings()
