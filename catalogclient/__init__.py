"""Client helpers for the catalog REST service."""

from .errors import CatalogClientError, ConfigError, LinkResolutionError
from .links import GET_FROM_URL, extract_url_from_token, resolve_links
from .model import CatalogObject, KeyValueMetadata
from .remote import RemoteObjectService
from .service import CatalogObjectService

__all__ = [
    "CatalogClientError",
    "ConfigError",
    "LinkResolutionError",
    "GET_FROM_URL",
    "extract_url_from_token",
    "resolve_links",
    "CatalogObject",
    "KeyValueMetadata",
    "RemoteObjectService",
    "CatalogObjectService",
]
