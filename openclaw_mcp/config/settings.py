"""
Settings
Configuration management for the OpenClaw MCP Server.
"""

import os
from dataclasses import dataclass
from typing import Optional


# Public OpenClaw deployment (Vercel)
DEFAULT_REGISTRY_URL = "https://openclaw-sandy-eight.vercel.app"


def get_registry_url() -> str:
    """
    Get the registry base origin.
    
    OPENCLAW_REGISTRY_URL overrides the public deployment, e.g. for a
    local copy of the registry.
    """
    explicit_url = os.getenv("OPENCLAW_REGISTRY_URL")
    if explicit_url:
        return explicit_url.rstrip("/")
    return DEFAULT_REGISTRY_URL


@dataclass
class Config:
    """Server configuration."""
    log_level: str = "INFO"
    registry_url: str = ""  # Set in __post_init__
    
    def __post_init__(self):
        if not self.registry_url:
            self.registry_url = get_registry_url()


class ConfigManager:
    """Configuration manager - loads and provides config."""
    
    _instance: Optional["ConfigManager"] = None
    
    def __init__(self):
        self._config: Optional[Config] = None
    
    @classmethod
    def get_instance(cls) -> "ConfigManager":
        """Get singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance
    
    def load(self) -> Config:
        """Load configuration from environment."""
        self._config = Config(
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            registry_url=get_registry_url(),
        )
        return self._config
    
    def get(self) -> Config:
        """Get current configuration."""
        if self._config is None:
            self._config = self.load()
        return self._config
