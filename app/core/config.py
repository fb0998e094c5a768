# app/core/config.py
from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    env: str = "dev"
    database_url: str = "sqlite+aiosqlite:///./orion.db"

    # Proveedor de identidad (Clerk)
    clerk_issuer: str = ""
    clerk_jwks_url: str = ""
    clerk_jwt_secret: str = ""
    clerk_audience: str | None = None

    log_level: str = "INFO"
    create_tables_on_startup: bool = True
    cors_origins: list[str] = ["*"]

    # Busca primero en variables de entorno y luego en .env
    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).resolve().parents[2] / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

settings = Settings()
