"""
Query the catalog service: object metadata, raw content, and content with
its PA:GET_FROM_URL links resolved.
"""

from typing import Optional

import structlog

from . import links
from .model import CatalogObject
from .remote import RemoteObjectService

logger = structlog.get_logger(__name__)

BUCKETS_PATH = "buckets/"
RESOURCES_PATH = "/resources/"
RAW_PATH = "/raw"


class CatalogObjectService:
    """Builds catalog resource URLs and fetches them through a remote object service."""

    def __init__(self, remote: RemoteObjectService, max_substitutions: Optional[int] = None):
        self.remote = remote
        self.max_substitutions = max_substitutions

    def get_catalog_object_metadata(self, catalog_url: str, bucket_id: int, name: str,
                                    session_id: Optional[str] = None) -> CatalogObject:
        """Get the metadata of a catalog object.

        Args:
            catalog_url: The catalog URL
            bucket_id: Id of the bucket containing the object
            name: The object name
            session_id: Session used to authenticate against the catalog

        Returns:
            A CatalogObject holding the object information
        """
        url = self.get_url(catalog_url, bucket_id, name, False)
        catalog_object = self.remote.fetch_typed(url, session_id, CatalogObject)
        logger.info("catalog_object_fetched", url=url, kind=catalog_object.kind)
        return catalog_object

    def get_raw_catalog_object(self, catalog_url: str, bucket_id: int, name: str,
                               session_id: Optional[str] = None) -> str:
        """Get the content of a catalog object as text."""
        url = self.get_url(catalog_url, bucket_id, name, True)
        return self.remote.fetch_text(url, session_id)

    def get_resolved_catalog_object(self, catalog_url: str, bucket_id: int, resource_id: str,
                                    resolve_links: bool, session_id: Optional[str] = None) -> str:
        """Get a resource from the catalog, replacing PA:GET_FROM_URL("url") by its value.

        Args:
            catalog_url: The catalog URL
            bucket_id: Id of the bucket containing the resource
            resource_id: The resource name
            resolve_links: When False the raw resource is returned untouched
            session_id: Session used for the catalog and for every linked URL

        Returns:
            The resource content
        """
        resource = self.get_raw_catalog_object(catalog_url, bucket_id, resource_id, session_id)
        if not resolve_links:
            return resource

        return links.resolve_links(resource, lambda url: self.remote.fetch_text(url, session_id),
                                   self.max_substitutions)

    def get_url(self, catalog_url: str, bucket_id: int, name: str, raw: bool) -> str:
        """Build the URL of a catalog resource: its content when raw is True, its metadata otherwise."""
        return (catalog_url + ("" if catalog_url.endswith("/") else "/") + BUCKETS_PATH + str(bucket_id)
                + RESOURCES_PATH + name + (RAW_PATH if raw else ""))

    @staticmethod
    def extract_url_from_token(token: str) -> str:
        return links.extract_url_from_token(token)
