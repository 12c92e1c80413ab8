from typing import Literal, List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import SecretStr, field_validator
from sqlalchemy.engine.url import URL, make_url

SchemaMode = Literal["none", "create", "create-drop"]

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # App
    APP_NAME: str = "Expense API"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["local", "dev", "staging", "prod"] = "local"
    DEBUG: bool = False
    API_PREFIX: str = "/api"
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 8080
    CORS_ORIGINS: str = "*"      # CSV or '*'
    LOG_LEVEL: str = "INFO"

    # DB
    DATABASE_URL: Optional[SecretStr] = None   # full URL, wins over the DB_* parts
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_NAME: str = "expenses"
    DB_USER: str = "postgres"
    DB_PASSWORD: SecretStr = SecretStr("")
    DB_SSL: bool = False
    DB_SCHEMA_MODE: SchemaMode = "create"

    # -------- validators --------
    @field_validator("APP_PORT", "DB_PORT")
    @classmethod
    def _port_range(cls, v: int, info):
        if not 0 < v < 65536:
            raise ValueError(f"{info.field_name} must be between 1 and 65535")
        return v

    @field_validator("API_PREFIX")
    @classmethod
    def _normalize_prefix(cls, v: str) -> str:
        v = (v or "").strip().strip("/")
        return f"/{v}" if v else ""

    @field_validator("LOG_LEVEL")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return (v or "INFO").strip().upper()

    @field_validator("DATABASE_URL")
    @classmethod
    def _empty_url_is_none(cls, v):
        if v is not None and v.get_secret_value().strip() == "":
            return None
        return v

    @property
    def CORS_ORIGINS_LIST(self) -> List[str]:
        return ["*"] if self.CORS_ORIGINS.strip() == "*" else [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

    @property
    def SQLALCHEMY_URL(self) -> URL:
        """Async driver URL for the store.

        A ``DATABASE_URL`` given as plain ``postgresql://`` is rewritten to the
        asyncpg driver and stripped of query options asyncpg does not accept.
        """
        if self.DATABASE_URL is None:
            return URL.create(
                drivername="postgresql+asyncpg",
                username=self.DB_USER,
                password=self.DB_PASSWORD.get_secret_value() or None,
                host=self.DB_HOST,
                port=self.DB_PORT,
                database=self.DB_NAME,
            )

        u = make_url(self.DATABASE_URL.get_secret_value())
        if u.get_backend_name() != "postgresql":
            return u
        return URL.create(
            drivername="postgresql+asyncpg",
            username=u.username,
            password=u.password,
            host=u.host,
            port=u.port,
            database=u.database,
        )

settings = Settings()
