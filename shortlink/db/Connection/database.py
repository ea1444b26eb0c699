import logging
from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker
from shortlink.core.config import settings
from redis.connection import ConnectionPool
import redis

from shortlink.db.Models import models

logger = logging.getLogger(__name__)


def make_engine(url: str):
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, pool_pre_ping=True, connect_args=connect_args)


engine = make_engine(settings.sqlalchemy_database_url)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind=None):
    models.Base.metadata.create_all(bind=bind or engine)
    logger.info("Database models initialized/checked.")


def make_redis_client(host: str, port: int):
    pool = ConnectionPool(
        host=host,
        port=port,
        decode_responses=True,
        max_connections=50,
        socket_connect_timeout=2,
        socket_keepalive=True,
        retry_on_timeout=True,
    )
    return redis.Redis(connection_pool=pool)


redis_client = make_redis_client(settings.REDIS_HOST, settings.REDIS_PORT) if settings.REDIS_HOST else None


def verify_redis_connection(client=None):
    client = client or redis_client
    if client is None:
        logger.info("Redis not configured, cache disabled")
        return False
    try:
        client.ping()
        logger.info("Redis connection verified")
        return True
    except redis.exceptions.ConnectionError as e:
        logger.warning(f"Redis connection failed: {e}. Service will run without cache.")
        return False


def verify_database_connection(bind=None):
    try:
        with (bind or engine).connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("Database connection verified")
        return True
    except Exception as e:
        logger.error(f"Database connection failed: {e}")
        return False
