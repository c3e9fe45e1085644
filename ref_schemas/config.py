"""
Configuration and environment handling for ref_schemas.
"""
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load environment variables
load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class LinkedDataConfig(BaseModel):
    """JSON-LD output configuration."""
    vocab_url: str = Field(default_factory=lambda: os.getenv("REFFO_VOCAB_URL", "https://schema.org/"))
    namespace_prefix: str = Field(default="reffo")
    namespace_url: str = Field(default_factory=lambda: os.getenv("REFFO_NAMESPACE_URL", "https://reffo.ai/ns/"))
    default_currency: str = Field(
        default_factory=lambda: os.getenv("REFFO_DEFAULT_CURRENCY", "USD"),
        description="ISO 4217 code used when an offer has no currency",
    )

    @property
    def condition_key(self) -> str:
        """Namespaced key under which a ref's condition is exported."""
        return f"{self.namespace_prefix}:condition"


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = Field(default_factory=lambda: os.getenv("REFFO_LOG_LEVEL", "INFO"))
    json_output: bool = Field(default_factory=lambda: _env_flag("REFFO_LOG_JSON"))


class Config(BaseModel):
    """Main configuration."""
    linked_data: LinkedDataConfig = Field(default_factory=LinkedDataConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# Singleton config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the singleton config instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Drop the cached config so the next get_config() re-reads the environment."""
    global _config
    _config = None
