"""Key-value cache stores with per-entry expiry."""
from __future__ import annotations

import time
import logging
from threading import Lock
from typing import Callable, Dict, Optional, Protocol, Tuple

from sqlalchemy.exc import SQLAlchemyError

from geocoding_service.config.settings import get_cache_lifetime
from geocoding_service.db import database
from geocoding_service.db.database import CacheEntryDB, create_tables

# Get logger
logger = logging.getLogger(__name__)


class CacheStore(Protocol):
    """Load/save-by-key interface the geocoder depends on."""

    def load(self, key: str) -> Optional[str]: ...

    def save(self, value: str, key: str, lifetime: Optional[int] = None) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryCache:
    """Process-local store. Entries expire after `lifetime` seconds."""

    def __init__(self, namespace: str, clock: Callable[[], float] = time.time, lifetime: Optional[int] = None):
        self.namespace = namespace
        self.clock = clock
        self.lifetime = get_cache_lifetime() if lifetime is None else lifetime
        self._entries: Dict[str, Tuple[str, Optional[float]]] = {}
        self._lock = Lock()

    def load(self, key: str) -> Optional[str]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            value, expires_at = entry
            if expires_at is not None and expires_at <= self.clock():
                del self._entries[key]
                return None
            return value

    def save(self, value: str, key: str, lifetime: Optional[int] = None) -> None:
        lifetime = self.lifetime if lifetime is None else lifetime
        expires_at = self.clock() + lifetime if lifetime else None
        with self._lock:
            self._entries[key] = (value, expires_at)

    def remove(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)


class DatabaseCache:
    """
    Store backed by the `cache_entries` table.

    Database failures are logged and reported as a cache miss (load) or
    ignored (save/remove) so callers never see SQLAlchemy errors.
    """

    def __init__(self, namespace: str, session_factory=None, clock: Callable[[], float] = time.time,
                 lifetime: Optional[int] = None):
        self.namespace = namespace
        self.session_factory = session_factory if session_factory is not None else database.SessionLocal
        self._table_ready = False
        self.clock = clock
        self.lifetime = get_cache_lifetime() if lifetime is None else lifetime

    def _ensure_table(self, db):
        # The table is created on first use so callers need not run create_tables
        if not self._table_ready:
            create_tables(bind=db.get_bind())
            self._table_ready = True

    def load(self, key: str) -> Optional[str]:
        db = self.session_factory()
        try:
            self._ensure_table(db)
            entry = db.get(CacheEntryDB, (self.namespace, key))
            if entry is None:
                return None
            if entry.expires_at is not None and entry.expires_at <= self.clock():
                db.delete(entry)
                db.commit()
                logger.debug(f"Purged expired cache entry {self.namespace}/{key}")
                return None
            return entry.value
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error loading cache entry {self.namespace}/{key}: {e}")
            return None
        finally:
            db.close()

    def save(self, value: str, key: str, lifetime: Optional[int] = None) -> None:
        lifetime = self.lifetime if lifetime is None else lifetime
        expires_at = self.clock() + lifetime if lifetime else None
        db = self.session_factory()
        try:
            self._ensure_table(db)
            db.merge(CacheEntryDB(namespace=self.namespace, key=key, value=value, expires_at=expires_at))
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error saving cache entry {self.namespace}/{key}: {e}")
        finally:
            db.close()

    def remove(self, key: str) -> None:
        db = self.session_factory()
        try:
            self._ensure_table(db)
            db.query(CacheEntryDB).filter(
                CacheEntryDB.namespace == self.namespace,
                CacheEntryDB.key == key
            ).delete()
            db.commit()
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"Error removing cache entry {self.namespace}/{key}: {e}")
        finally:
            db.close()


def cache_factory(namespace: str) -> CacheStore:
    """Return the configured cache store for `namespace`."""
    return DatabaseCache(namespace)
