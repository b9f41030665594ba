"""
Blackboard configuration with validation and environment management.

All settings are read from the environment (prefix ``BLACKBOARD_``) or a
local ``.env`` file and validated on import.
"""

from typing import Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Blackboard settings with validation."""

    # Logging
    log_level: str = "INFO"
    log_format: str = "text"

    # Add with a dangling key raises instead of dropping the tail
    strict_pairs: bool = True

    # Optional YAML protection policy
    policy_file: Optional[str] = None

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format."""
        if v.lower() not in ["json", "text"]:
            raise ValueError("log_format must be 'json' or 'text'")
        return v.lower()

    class Config:
        env_prefix = "BLACKBOARD_"
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


# Create settings instance
settings = Settings()
