"""Settings model for mentions_library.

Contract:
- Inputs: Environment variables (MENTIONS_*), .env file, keyword arguments
- Outputs: Validated settings objects
- Side Effects: None (read-only)
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


class MentionsSettings(BaseSettings):
    """Configuration for mention parsing and diffing.

    Attributes:
        trigger: Prefix rendered before every mention name (default: @)
        diff_timeout: Seconds the character differ may spend before settling
            for a non-minimal diff; 0 disables the deadline (default: 0.0)

    Example:
        >>> settings = MentionsSettings()
        >>> assert settings.trigger == "@"
        >>> assert settings.diff_timeout == 0.0
    """

    model_config = SettingsConfigDict(
        env_prefix="MENTIONS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    trigger: str = "@"
    diff_timeout: float = 0.0

    @field_validator("trigger")
    @classmethod
    def require_trigger(cls, v: str) -> str:
        """Reject an empty trigger."""
        if not v:
            raise ValueError("trigger must not be empty")
        return v

    @field_validator("diff_timeout")
    @classmethod
    def require_non_negative_timeout(cls, v: float) -> float:
        if v < 0:
            raise ValueError("diff_timeout must be >= 0")
        return v
