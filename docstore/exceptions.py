"""
Custom exceptions for the document store client
"""

class DocStoreError(Exception):
    """Base exception for all document store client errors"""
    def __init__(self, message: str, status_code: int = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

class ConstructionError(DocStoreError):
    """Raised when a request cannot be built (e.g. malformed base URL)"""
    pass

class TransportError(DocStoreError):
    """Raised when the HTTP round trip could not be completed"""
    pass

class RemoteError(DocStoreError):
    """Raised when the store answers with a non-success status"""
    pass

class AuthenticationError(RemoteError):
    """Raised when credentials are missing or rejected"""
    pass

class NotFoundError(RemoteError):
    """Raised when the store reports the endpoint or index is missing"""
    pass

class DecodeError(DocStoreError):
    """Raised when the response body is not the expected JSON"""
    pass
