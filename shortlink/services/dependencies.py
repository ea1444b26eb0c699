from functools import lru_cache
import logging

from shortlink.core.config import settings
from shortlink.db.Connection import database
from shortlink.db.repository import SQLURLStore
from shortlink.db.store import InMemoryURLStore
from shortlink.schemas.ShortUrlOptions import CreateShortUrlOptions
from shortlink.services.RedisURLCache import RedisURLCache
from shortlink.services.shortener import URLService

logger = logging.getLogger(__name__)


def default_options_from_settings() -> CreateShortUrlOptions:
    return CreateShortUrlOptions(
        domain=settings.SHORT_URL_DOMAIN,
        include_protocol=settings.SHORT_URL_INCLUDE_PROTOCOL,
        protocol=settings.SHORT_URL_PROTOCOL,
        include_redirect_path=settings.SHORT_URL_INCLUDE_REDIRECT_PATH,
        redirect_path_segment=settings.SHORT_URL_REDIRECT_PATH_SEGMENT,
        path_separator=settings.SHORT_URL_PATH_SEPARATOR,
        hash_algorithm=settings.HASH_ALGORITHM,
    )


def build_store():
    if settings.STORE_BACKEND == "sql":
        if not database.verify_database_connection():
            raise RuntimeError("Cannot connect to database for STORE_BACKEND=sql")
        database.init_db()
        store = SQLURLStore(database.SessionLocal)
        if database.verify_redis_connection():
            store = RedisURLCache(store, database.redis_client, ttl=settings.CACHE_TTL)
        logger.info("Using SQL store (redis cache: %s)", isinstance(store, RedisURLCache))
        return store
    if settings.STORE_BACKEND != "memory":
        raise ValueError(f"Unknown STORE_BACKEND '{settings.STORE_BACKEND}', expected 'memory' or 'sql'")
    logger.info("Using in-memory store")
    return InMemoryURLStore()


@lru_cache()
def get_url_service() -> URLService:
    """FastAPI dependency: one URLService per process."""
    return URLService(build_store(), default_options_from_settings())
