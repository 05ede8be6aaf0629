"""
Multi-get: retrieve several documents in a single request
"""

import logging
from typing import Dict, Any, List, Optional

from .exceptions import DecodeError
from .models import FetchSourceContext, MultiGetResult
from .versions import MATCH_ANY

logger = logging.getLogger(__name__)

MULTI_GET_PATH = "/_mget"


def _bool_param(value: bool) -> str:
    return "true" if value else "false"


class MultiGetItem:
    """
    A single document to retrieve via MultiGetService

    Example:
        >>> item = MultiGetItem().index("tweets").doc_type("tweet").id("1")
        >>> item.to_dict()
        {'_index': 'tweets', '_type': 'tweet', '_id': '1'}
    """

    def __init__(self):
        self._index = ""
        self._type = ""
        self._id = ""
        self._routing = ""
        self._fields: Optional[List[str]] = None
        self._version = MATCH_ANY
        self._version_type = ""
        self._fetch_source: Optional[FetchSourceContext] = None

    def index(self, index: str) -> "MultiGetItem":
        self._index = index
        return self

    def doc_type(self, doc_type: str) -> "MultiGetItem":
        self._type = doc_type
        return self

    def id(self, doc_id: str) -> "MultiGetItem":
        self._id = doc_id
        return self

    def routing(self, routing: str) -> "MultiGetItem":
        self._routing = routing
        return self

    def fields(self, *fields: str) -> "MultiGetItem":
        """Append stored fields to return; repeated calls accumulate"""
        if self._fields is None:
            self._fields = []
        self._fields.extend(fields)
        return self

    def version(self, version: int) -> "MultiGetItem":
        """
        Set the expected document version

        Sentinels from docstore.versions: MATCH_ANY (-3, default),
        MATCH_ANY_PRE_120 (0), NOT_FOUND (-1), NOT_SET (-2).
        Any integer is accepted.
        """
        self._version = version
        return self

    def version_type(self, version_type: str) -> "MultiGetItem":
        """
        Set the version type, one of docstore.versions.VERSION_TYPES:
        "internal" (VERSION_TYPE_INTERNAL, the default), "external",
        "external_gt", "external_gte" or "force". Not validated.
        """
        self._version_type = version_type
        return self

    def fetch_source(self, fetch_source_context: FetchSourceContext) -> "MultiGetItem":
        self._fetch_source = fetch_source_context
        return self

    def get_version(self) -> int:
        return self._version

    def get_version_type(self) -> str:
        return self._version_type

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize to the JSON object sent as one entry of "docs"

        Version and version type are not part of the body.
        """
        source: Dict[str, Any] = {}

        if self._index:
            source["_index"] = self._index
        if self._type:
            source["_type"] = self._type
        source["_id"] = self._id

        if self._fetch_source is not None:
            source["_source"] = self._fetch_source.to_dict()

        if self._fields is not None:
            source["_fields"] = list(self._fields)

        if self._routing:
            source["_routing"] = self._routing

        return source

    def __repr__(self):
        return f"MultiGetItem(index={self._index}, type={self._type}, id={self._id})"


class MultiGetService:
    """
    Builds and executes a multi-get request

    Example:
        >>> result = (
        ...     client.multi_get()
        ...     .preference("_local")
        ...     .add(MultiGetItem().index("tweets").id("1"))
        ...     .execute()
        ... )
        >>> for doc in result:
        ...     print(doc.id, doc.found)
    """

    def __init__(self, client):
        """
        Initialize MultiGetService

        Args:
            client: DocStoreClient instance (borrowed, not closed here)
        """
        self.client = client
        self._preference = ""
        self._realtime: Optional[bool] = None
        self._refresh: Optional[bool] = None
        self.items: List[MultiGetItem] = []

    def preference(self, preference: str) -> "MultiGetService":
        self._preference = preference
        return self

    def realtime(self, realtime: bool) -> "MultiGetService":
        self._realtime = realtime
        return self

    def refresh(self, refresh: bool) -> "MultiGetService":
        self._refresh = refresh
        return self

    def add(self, *items: MultiGetItem) -> "MultiGetService":
        self.items.extend(items)
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the request body"""
        return {"docs": [item.to_dict() for item in self.items]}

    def query_params(self) -> Dict[str, str]:
        """Query parameters; unset options are left out"""
        params = {}
        if self._realtime is not None:
            params["realtime"] = _bool_param(self._realtime)
        if self._preference:
            params["preference"] = self._preference
        if self._refresh is not None:
            params["refresh"] = _bool_param(self._refresh)
        return params

    def execute(self) -> MultiGetResult:
        """
        Send the request and decode the response

        Returns:
            MultiGetResult with one GetResult per returned document

        Raises:
            ConstructionError: If the request cannot be built
            TransportError: If the HTTP round trip fails
            RemoteError: On a non-success status
            DecodeError: If the body is not a valid multi-get response
        """
        request = self.client.new_request(
            "GET",
            MULTI_GET_PATH,
            params=sorted(self.query_params().items()),
            body=self.to_dict()
        )

        response = self.client.perform(request)
        try:
            self.client.check_response(response)

            try:
                payload = response.json()
            except ValueError as e:
                # requests' JSONDecodeError is a ValueError
                logger.error("Invalid JSON in multi-get response: %s", e)
                raise DecodeError(f"Invalid JSON in response: {str(e)}", status_code=response.status_code)

            try:
                result = MultiGetResult.from_dict(payload)
            except DecodeError as e:
                logger.error("Unexpected multi-get response: %s", e.message)
                raise
        finally:
            response.close()

        logger.debug("Multi-get returned %d of %d requested documents", len(result), len(self.items))
        return result
