from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "shortlink"

    # Storage: "memory" keeps mappings for the process lifetime, "sql" uses DATABASE_URL
    STORE_BACKEND: str = "memory"
    DATABASE_URL: str = "sqlite:///./shortlink.db"

    # Postgres parts; when POSTGRES_SERVER is set they take precedence over DATABASE_URL
    POSTGRES_USER: Optional[str] = None
    POSTGRES_PASSWORD: Optional[str] = None
    POSTGRES_SERVER: Optional[str] = None
    POSTGRES_PORT: str = "5432"
    POSTGRES_DB: Optional[str] = None

    # Redis cache in front of the store, disabled when REDIS_HOST is unset
    REDIS_HOST: Optional[str] = None
    REDIS_PORT: int = 6379
    CACHE_TTL: int = 86400

    # Short URL assembly defaults
    SHORT_URL_DOMAIN: str = "short.url"
    SHORT_URL_INCLUDE_PROTOCOL: bool = False
    SHORT_URL_PROTOCOL: str = "https"
    SHORT_URL_INCLUDE_REDIRECT_PATH: bool = True
    SHORT_URL_REDIRECT_PATH_SEGMENT: str = "r"
    SHORT_URL_PATH_SEPARATOR: str = "/"
    HASH_ALGORITHM: str = "djb2"

    LOG_LEVEL: str = "INFO"

    @property
    def sqlalchemy_database_url(self) -> str:
        if self.POSTGRES_SERVER:
            return (
                f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
                f"@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"
            )
        return self.DATABASE_URL

    class Config:
        env_file = ".env"

settings = Settings()
