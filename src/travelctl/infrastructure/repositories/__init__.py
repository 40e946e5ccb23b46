"""SQL-backed implementations of the catalog and visited-set stores."""

from travelctl.infrastructure.repositories.catalog import SqlCatalog
from travelctl.infrastructure.repositories.visited import SqlVisitedStore

__all__ = ["SqlCatalog", "SqlVisitedStore"]
