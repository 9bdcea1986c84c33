"""
Configuration settings for the CLI and the HTTP API.
Environment variables override defaults.
"""
import os
from dataclasses import dataclass, field
from typing import List

from sileo_depiction.constants import DEFAULT_CONSTANTS, DepictionConstants


@dataclass
class Settings:
    """Runtime configuration"""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False

    # CORS
    CORS_ORIGINS: List[str] = field(default_factory=lambda: ["*"])

    # Logging
    LOG_LEVEL: str = "INFO"

    # Depiction endpoints
    DEPICTION_API_BASE: str = DEFAULT_CONSTANTS.api
    DEPICTION_DONATE_TEXT: str = DEFAULT_CONSTANTS.donate_text
    DEPICTION_DONATE_LINK: str = DEFAULT_CONSTANTS.donate_link
    DEPICTION_WEB_URL: str = DEFAULT_CONSTANTS.web_depiction_url

    def __post_init__(self):
        """Load from environment variables"""
        for key in self.__dataclass_fields__:
            env_value = os.getenv(key)
            if env_value is not None:
                field_type = self.__dataclass_fields__[key].type
                if field_type == bool:
                    setattr(self, key, env_value.lower() in ("true", "1", "yes"))
                elif field_type == int:
                    setattr(self, key, int(env_value))
                elif field_type == List[str]:
                    setattr(self, key, env_value.split(","))
                else:
                    setattr(self, key, env_value)

    def constants(self) -> DepictionConstants:
        """The constants bundle handed to the tab assembler."""
        return DepictionConstants(
            api=self.DEPICTION_API_BASE.rstrip("/"),
            donate_text=self.DEPICTION_DONATE_TEXT,
            donate_link=self.DEPICTION_DONATE_LINK,
            web_depiction_url=self.DEPICTION_WEB_URL,
        )


# Global settings instance
settings = Settings()
