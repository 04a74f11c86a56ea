"""
Exceptions raised by the catalog client itself.

Transport, HTTP status and payload validation failures are not wrapped:
they surface as the httpx / pydantic exceptions that produced them.
"""


class CatalogClientError(Exception):
    """Base class for errors raised by catalogclient."""


class ConfigError(CatalogClientError):
    """Configuration file is missing or cannot be parsed."""


class LinkResolutionError(CatalogClientError):
    """Link resolution exceeded the configured substitution limit."""

    def __init__(self, limit: int, url: str):
        self.limit = limit
        self.url = url
        super().__init__(f"Link resolution stopped after {limit} substitutions, next link: {url}")
