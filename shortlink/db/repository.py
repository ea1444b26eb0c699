from typing import Callable, Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
import logging

from shortlink.db.Models.models import URLMapping

logger = logging.getLogger(__name__)


def get_url_by_identifier(db: Session, identifier: int) -> Optional[URLMapping]:
    return db.get(URLMapping, identifier)


def _commit_and_refresh(db: Session, db_url: URLMapping) -> URLMapping:
    try:
        db.add(db_url)
        db.commit()
        db.refresh(db_url)
        return db_url
    except IntegrityError as e:
        db.rollback()
        logger.warning(
            "IntegrityError saving URLMapping identifier=%s original=%s: %s",
            db_url.identifier, db_url.original_url[:50], str(e)
        )
        raise


def save_url(db: Session, identifier: int, original_url: str) -> URLMapping:
    """Insert or overwrite the mapping for identifier (last write wins)."""
    existing = get_url_by_identifier(db, identifier)
    if existing:
        existing.original_url = original_url
        return _commit_and_refresh(db, existing)

    try:
        return _commit_and_refresh(db, URLMapping(identifier=identifier, original_url=original_url))
    except IntegrityError:
        # Concurrent insert of the same identifier won; overwrite it
        existing = get_url_by_identifier(db, identifier)
        if existing is None:
            raise
        existing.original_url = original_url
        return _commit_and_refresh(db, existing)


class SQLURLStore:
    """URLStore backed by a SQLAlchemy session factory, one session per call."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def put(self, identifier: int, url: str) -> None:
        db = self.session_factory()
        try:
            save_url(db, identifier, url)
        finally:
            db.close()

    def get(self, identifier: int) -> Optional[str]:
        db = self.session_factory()
        try:
            db_url = get_url_by_identifier(db, identifier)
            return db_url.original_url if db_url else None
        finally:
            db.close()
