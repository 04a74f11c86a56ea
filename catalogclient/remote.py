"""
HTTP access to the catalog and to any URL referenced by a resource.
Keeps network code separate from URL building and link resolution.
"""

import time
from typing import Dict, Optional, Type, TypeVar

import httpx
import structlog
from pydantic import BaseModel

logger = structlog.get_logger(__name__)

SESSION_HEADER = "sessionid"

T = TypeVar("T", bound=BaseModel)


class RemoteObjectService:
    def __init__(
        self,
        user_agent: str = 'CatalogClient/1.0',
        timeout: float = 30.0,
        max_redirects: int = 5,
        verify_ssl: bool = True,
        client: httpx.Client = None
    ):
        """Initialize the remote object service with its HTTP client settings.

        Args:
            user_agent: User-Agent header sent with every request.
            timeout: Timeout in seconds for connect, read and write.
            max_redirects: Redirects followed before giving up.
            verify_ssl: Verify TLS certificates of the remote host.
            client: Pre-built client to use instead of creating one.
        """
        self.user_agent = user_agent
        self.timeout = timeout
        self.max_redirects = max_redirects

        if client is None:
            client = httpx.Client(
                timeout=httpx.Timeout(self.timeout),
                follow_redirects=True,
                max_redirects=self.max_redirects,
                verify=verify_ssl,
                headers={'User-Agent': self.user_agent},
            )
        self._client = client

    @classmethod
    def from_config(cls, fetcher_config: Dict) -> "RemoteObjectService":
        """Build the service from the `fetcher` configuration section."""
        return cls(
            user_agent=fetcher_config.get('user_agent', 'CatalogClient/1.0'),
            timeout=float(fetcher_config.get('timeout', 30.0)),
            max_redirects=int(fetcher_config.get('max_redirects', 5)),
            verify_ssl=bool(fetcher_config.get('verify_ssl', True)),
        )

    def fetch_text(self, url: str, session_id: Optional[str] = None) -> str:
        """GET url and return the response body as text."""
        response = self._get(url, session_id, accept='*/*')
        return response.text

    def fetch_typed(self, url: str, session_id: Optional[str], type_: Type[T]) -> T:
        """GET url and validate its JSON body into type_."""
        response = self._get(url, session_id, accept='application/json')
        return type_.model_validate(response.json())

    def _get(self, url: str, session_id: Optional[str], accept: str) -> httpx.Response:
        headers = {'Accept': accept}
        if session_id:
            headers[SESSION_HEADER] = session_id

        start_time = time.time()
        try:
            response = self._client.get(url, headers=headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning("remote_fetch_failed",
                           url=url,
                           status_code=e.response.status_code)
            raise
        except httpx.HTTPError as e:
            logger.warning("remote_fetch_failed",
                           url=url,
                           error=str(e))
            raise

        logger.debug("remote_fetch_completed",
                     url=url,
                     status_code=response.status_code,
                     size=len(response.content),
                     fetch_time=time.time() - start_time)
        return response

    def close(self):
        """Close the underlying HTTP client."""
        self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
