"""
HTTP client for the document store REST API
"""

import logging
import requests
from typing import Dict, Any, List, Optional, Tuple
from urllib.parse import urlparse

from . import __version__
from .config import ClientSettings, get_settings
from .multi_get import MultiGetService
from .exceptions import (
    ConstructionError,
    TransportError,
    RemoteError,
    AuthenticationError,
    NotFoundError
)

logger = logging.getLogger(__name__)

class DocStoreClient:
    """
    Low-level HTTP client for the document store

    Example:
        >>> with DocStoreClient("http://127.0.0.1:9200") as client:
        ...     result = client.multi_get().add(MultiGetItem().index("tweets").id("1")).execute()
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        session: Optional[requests.Session] = None,
        settings: Optional[ClientSettings] = None
    ):
        """
        Initialize the client

        Args:
            base_url: Store URL, e.g. http://127.0.0.1:9200 (default: DOCSTORE_URL)
            timeout: Request timeout in seconds (default: DOCSTORE_TIMEOUT)
            username: Basic auth user (default: DOCSTORE_USERNAME)
            password: Basic auth password (default: DOCSTORE_PASSWORD)
            session: Existing requests.Session to use; the caller keeps ownership
            settings: Settings to read defaults from instead of the environment
        """
        settings = settings or get_settings()

        self.base_url = (base_url if base_url is not None else settings.URL).rstrip('/')
        self.timeout = timeout if timeout is not None else settings.TIMEOUT
        username = username if username is not None else settings.USERNAME
        password = password if password is not None else settings.PASSWORD

        self._owns_session = session is None
        self.session = session or requests.Session()
        self.session.headers.update({
            "Accept": "application/json",
            "User-Agent": f"docstore-client/{__version__}"
        })
        if username:
            self.session.auth = (username, password or "")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()

    def close(self):
        """Close the session if this client created it"""
        if self._owns_session:
            self.session.close()

    def multi_get(self) -> MultiGetService:
        """Start a new multi-get request bound to this client"""
        return MultiGetService(self)

    def new_request(
        self,
        method: str,
        path: str,
        params: Optional[List[Tuple[str, str]]] = None,
        body: Optional[Dict[str, Any]] = None
    ) -> requests.PreparedRequest:
        """
        Build a request against the store

        Args:
            method: HTTP method (GET is allowed to carry a body)
            path: Path, e.g. "/_mget"
            params: Query parameters, encoded in the given order
            body: JSON body

        Returns:
            Prepared request with session headers and auth applied

        Raises:
            ConstructionError: If the base URL is malformed
        """
        try:
            parsed = urlparse(self.base_url)
        except ValueError as e:
            raise ConstructionError(f"Invalid base URL: {self.base_url!r} ({str(e)})")
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ConstructionError(f"Invalid base URL: {self.base_url!r}")

        url = f"{self.base_url}{path}"

        try:
            return self.session.prepare_request(
                requests.Request(method=method, url=url, params=params, json=body)
            )
        except ValueError as e:
            # MissingSchema, InvalidSchema and InvalidURL are ValueErrors too
            raise ConstructionError(f"Could not build request: {str(e)}")

    def perform(self, request: requests.PreparedRequest) -> requests.Response:
        """
        Send a prepared request

        Raises:
            TransportError: If the round trip fails; never retried
        """
        logger.debug("%s %s", request.method, request.url)

        try:
            return self.session.send(request, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            logger.warning("Request timeout: %s %s", request.method, request.url)
            raise TransportError(f"Request timeout: {str(e)}")
        except requests.exceptions.ConnectionError as e:
            logger.warning("Connection failed: %s %s", request.method, request.url)
            raise TransportError(f"Connection failed: {str(e)}")
        except requests.exceptions.RequestException as e:
            logger.warning("Request failed: %s %s", request.method, request.url)
            raise TransportError(f"Request failed: {str(e)}")

    def check_response(self, response: requests.Response):
        """Raise RemoteError (or a subclass) unless the status is 2xx"""
        if 200 <= response.status_code < 300:
            return

        message = self._error_message(response)
        logger.warning("Store returned HTTP %d: %s", response.status_code, message)

        if response.status_code in (401, 403):
            raise AuthenticationError(message, status_code=response.status_code)
        elif response.status_code == 404:
            raise NotFoundError(message, status_code=404)
        else:
            raise RemoteError(message, status_code=response.status_code)

    def _error_message(self, response: requests.Response) -> str:
        """Extract the error text from a failed response"""
        try:
            error = response.json().get("error")
        except (ValueError, AttributeError):
            error = None

        if isinstance(error, dict):
            error = error.get("reason") or error.get("type")
        if error:
            return f"Error {response.status_code}: {error}"
        return response.text or f"HTTP {response.status_code}"
