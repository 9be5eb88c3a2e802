# rbac_admin/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional, List
from dotenv import load_dotenv

# Carga las variables de entorno desde el archivo .env
load_dotenv()


class Settings(BaseSettings):
    """
    Clase que centraliza todas las configuraciones de la aplicación.
    Lee variables de entorno y las valida con Pydantic.
    """

    # --- Base de Datos ---
    DATABASE_URL: str = "sqlite+aiosqlite:///./rbac_admin.db"
    DATABASE_ECHO: bool = False
    # Crea las tablas a partir de los modelos al arrancar (no hay migraciones).
    CREATE_TABLES_ON_STARTUP: bool = True

    # --- Configuración General de la Aplicación y CORS ---
    ENVIRONMENT: str = "development"  # "development" o "production"
    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:8000",
        "http://localhost:5173",
        "http://127.0.0.1:5500",
    ]
    LOG_LEVEL: str = "INFO"

    # --- JWT ---
    JWT_SECRET_KEY: str  # Requerido en .env
    JWT_ALGORITHM: str = "HS256"
    JWT_ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 8
    JWT_ISSUER: Optional[str] = None
    JWT_AUDIENCE: Optional[str] = None

    # --- Contraseñas ---
    PASSWORD_BCRYPT_ROUNDS: int = 12

    # --- Personas ---
    # Dominio usado para sintetizar el email cuando una persona no lo trae.
    DEFAULT_EMAIL_DOMAIN: str = "example.com"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


settings = Settings()
