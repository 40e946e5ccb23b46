"""Tracker: the state object injected into every service.

A Tracker owns exactly one catalog store and one visited store for the
configured backend. There is no module-level state: each CLI invocation,
web app, or test builds its own Tracker, so two Trackers never share a
visited set.

Known limitation: one Tracker holds one visited set. Users of a shared web
process all see the same list (usernames are display labels only).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from travelctl.domain.types import StorageBackend
from travelctl.infrastructure.catalog_source import load_catalog
from travelctl.infrastructure.database.engine import init_database, seed_catalog
from travelctl.infrastructure.memory import InMemoryCatalog, InMemoryVisitedStore
from travelctl.infrastructure.repositories import SqlCatalog, SqlVisitedStore

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from travelctl.config.settings import TravelSettings
    from travelctl.infrastructure.stores import CatalogStore, VisitedStore

logger = logging.getLogger(__name__)


class Tracker:
    """Bundle of the catalog and visited stores behind one backend.

    Constructed once at startup (``from_settings``) or directly in tests.
    Services receive the Tracker via their :class:`BaseService` constructor.
    """

    def __init__(
        self,
        catalog: CatalogStore,
        visited: VisitedStore,
        *,
        backend: StorageBackend = StorageBackend.MEMORY,
        engine: Engine | None = None,
    ) -> None:
        self._catalog = catalog
        self._visited = visited
        self._backend = backend
        self._engine = engine

    @classmethod
    def from_settings(cls, settings: TravelSettings) -> Tracker:
        """Build the backend named by ``settings.backend``.

        Raises:
            CatalogLoadError: If the reference CSV cannot be loaded. For the
                SQL backend the CSV is only read when the catalog table is
                still empty.
        """
        if settings.backend is StorageBackend.MEMORY:
            return cls.in_memory(InMemoryCatalog.from_csv(settings.catalog_path))
        return cls.open_database(settings)

    @classmethod
    def in_memory(cls, catalog: InMemoryCatalog) -> Tracker:
        """A memory-backed Tracker with an empty visited set."""
        logger.debug("Using memory backend with %d countries", len(catalog))
        return cls(catalog, InMemoryVisitedStore(), backend=StorageBackend.MEMORY)

    @classmethod
    def open_database(cls, settings: TravelSettings) -> Tracker:
        """A SQL-backed Tracker; seeds the catalog table on first use."""
        engine = init_database(settings.database_path)
        catalog = SqlCatalog(engine)
        if len(catalog) == 0:
            try:
                seed_catalog(engine, load_catalog(settings.catalog_path))
            except BaseException:
                engine.dispose()
                raise
        logger.debug("Using SQL backend at %s", settings.database_path)
        return cls(catalog, SqlVisitedStore(engine), backend=StorageBackend.SQL, engine=engine)

    @property
    def catalog(self) -> CatalogStore:
        """The read-only reference set."""
        return self._catalog

    @property
    def visited(self) -> VisitedStore:
        """The mutable visited set."""
        return self._visited

    @property
    def backend(self) -> StorageBackend:
        return self._backend

    @property
    def engine(self) -> Engine | None:
        """The SQLAlchemy engine (None for the memory backend)."""
        return self._engine

    def close(self) -> None:
        """Release database connections (no-op for the memory backend)."""
        if self._engine is not None:
            self._engine.dispose()
