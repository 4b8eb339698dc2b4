"""Custom exceptions for catalog services."""


class CatalogServiceError(Exception):
    """Base exception for catalog service errors."""
    pass


class RemoteCatalogError(CatalogServiceError):
    """Raised when the public registry answers with something unusable."""
    pass
