"""
Configuration Settings
Environment variables and client defaults
"""

from pydantic_settings import BaseSettings
from typing import Optional

class ClientSettings(BaseSettings):
    # Connection
    URL: str = "http://127.0.0.1:9200"
    TIMEOUT: float = 30.0  # seconds
    
    # Basic auth (optional)
    USERNAME: Optional[str] = None
    PASSWORD: Optional[str] = None
    
    class Config:
        env_prefix = "DOCSTORE_"
        env_file = ".env"
        extra = "ignore"

def get_settings() -> ClientSettings:
    """Read settings from the environment and .env file"""
    return ClientSettings()
