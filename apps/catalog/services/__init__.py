"""Services for the catalog app."""

from .exceptions import CatalogServiceError, RemoteCatalogError
from .pncp import (
    search_catalog,
    search_local,
    list_catalogs,
    normalize_kind,
    KIND_MATERIAL,
    KIND_SERVICE,
    KIND_ALIASES,
)

__all__ = [
    # Exceptions
    'CatalogServiceError',
    'RemoteCatalogError',
    # Public catalog
    'search_catalog',
    'search_local',
    'list_catalogs',
    'normalize_kind',
    'KIND_MATERIAL',
    'KIND_SERVICE',
    'KIND_ALIASES',
]
