"""
Data models for the document store client
"""

from typing import Optional, Dict, Any, List, Union
from .exceptions import DecodeError

class FetchSourceContext:
    """
    Source filtering directive: which parts of a document's stored
    _source to return
    
    Example:
        >>> fsc = FetchSourceContext().include("user", "message").exclude("*.raw")
        >>> fsc.to_dict()
        {'includes': ['user', 'message'], 'excludes': ['*.raw']}
    """
    
    def __init__(self, fetch_source: bool = True):
        self.fetch_source = fetch_source
        self.includes: List[str] = []
        self.excludes: List[str] = []
    
    def include(self, *fields: str) -> "FetchSourceContext":
        self.includes.extend(fields)
        return self
    
    def exclude(self, *fields: str) -> "FetchSourceContext":
        self.excludes.extend(fields)
        return self
    
    def to_dict(self) -> Union[bool, Dict[str, Any]]:
        """Convert to the JSON value sent as _source"""
        if not self.fetch_source:
            return False
        return {
            "includes": list(self.includes),
            "excludes": list(self.excludes)
        }
    
    def query_string(self) -> str:
        """Value for a _source query parameter"""
        if not self.fetch_source:
            return "false"
        return ",".join(self.includes)
    
    def __repr__(self):
        return f"FetchSourceContext(fetch_source={self.fetch_source}, includes={self.includes}, excludes={self.excludes})"


class GetResult:
    """Result of retrieving a single document"""
    
    _ATTRIBUTES = ("index", "type", "id", "version", "source", "found", "fields", "error")
    
    def __init__(
        self,
        index: str = "",
        type: str = "",
        id: str = "",
        version: Optional[int] = None,
        source: Optional[Any] = None,
        found: bool = False,
        fields: Optional[Dict[str, Any]] = None,
        error: Optional[Any] = None,
        **kwargs  # Keep any additional fields sent by the store
    ):
        self.index = index
        self.type = type
        self.id = id
        self.version = version
        self.source = source
        self.found = found
        self.fields = fields
        self.error = error
        
        for key, value in kwargs.items():
            setattr(self, key, value)
    
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GetResult":
        """Build from one element of a response's docs array"""
        if not isinstance(data, dict):
            raise DecodeError(f"Expected a JSON object for a document, got {type(data).__name__}")
        
        result = cls(
            index=data.get("_index", ""),
            type=data.get("_type", ""),
            id=data.get("_id", ""),
            version=data.get("_version"),
            source=data.get("_source"),
            found=bool(data.get("found", False)),
            fields=data.get("fields"),
            error=data.get("error")
        )
        
        # Extra keys become attributes unless they would shadow a known field or method
        for key, value in data.items():
            name = key.lstrip("_")
            if name and name not in cls._ATTRIBUTES and not hasattr(cls, name):
                setattr(result, name, value)
        
        return result
    
    def get(self, key: str, default=None):
        """Dictionary-like get method"""
        return getattr(self, key, default)
    
    def __getitem__(self, key: str):
        """Dictionary-like access"""
        return getattr(self, key)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary in the store's wire naming"""
        result = {
            "_index": self.index,
            "_type": self.type,
            "_id": self.id,
            "found": self.found,
        }
        
        if self.version is not None:
            result["_version"] = self.version
        if self.source is not None:
            result["_source"] = self.source
        if self.fields is not None:
            result["fields"] = self.fields
        if self.error is not None:
            result["error"] = self.error
        
        return result
    
    def __repr__(self):
        return f"GetResult(index={self.index}, type={self.type}, id={self.id}, found={self.found})"


class MultiGetResult:
    """Decoded response of a multi-get request"""
    
    def __init__(self, docs: Optional[List[GetResult]] = None):
        self.docs = docs if docs is not None else []
    
    @classmethod
    def from_dict(cls, payload: Any) -> "MultiGetResult":
        """
        Build from the decoded JSON body
        
        Raises:
            DecodeError: If the body is not shaped like {"docs": [...]}
        """
        if not isinstance(payload, dict):
            raise DecodeError(f"Expected a JSON object, got {type(payload).__name__}")
        
        # A missing or null docs key decodes to an empty batch
        docs = payload.get("docs")
        if docs is None:
            return cls()
        if not isinstance(docs, list):
            raise DecodeError(f"Expected 'docs' to be an array, got {type(docs).__name__}")
        
        return cls([GetResult.from_dict(item) for item in docs])
    
    def __len__(self):
        return len(self.docs)
    
    def __iter__(self):
        return iter(self.docs)
    
    def __getitem__(self, index: int) -> GetResult:
        return self.docs[index]
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {"docs": [doc.to_dict() for doc in self.docs]}
    
    def __repr__(self):
        return f"MultiGetResult(docs={len(self.docs)})"
