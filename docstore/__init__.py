"""
docstore-client - Python client for a document store's REST API
Batched document retrieval (multi-get) with typed results
"""

__version__ = "1.0.0"

from .client import DocStoreClient
from .config import ClientSettings
from .models import FetchSourceContext, GetResult, MultiGetResult
from .multi_get import MultiGetItem, MultiGetService
from .versions import (
    MATCH_ANY,
    MATCH_ANY_PRE_120,
    NOT_FOUND,
    NOT_SET,
    VERSION_TYPE_INTERNAL,
    VERSION_TYPES
)
from .exceptions import (
    DocStoreError,
    ConstructionError,
    TransportError,
    RemoteError,
    AuthenticationError,
    NotFoundError,
    DecodeError
)

__all__ = [
    "DocStoreClient",
    "ClientSettings",
    "FetchSourceContext",
    "GetResult",
    "MultiGetResult",
    "MultiGetItem",
    "MultiGetService",
    "MATCH_ANY",
    "MATCH_ANY_PRE_120",
    "NOT_FOUND",
    "NOT_SET",
    "VERSION_TYPE_INTERNAL",
    "VERSION_TYPES",
    "DocStoreError",
    "ConstructionError",
    "TransportError",
    "RemoteError",
    "AuthenticationError",
    "NotFoundError",
    "DecodeError"
]
