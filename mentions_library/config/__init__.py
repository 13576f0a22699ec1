"""Configuration module for mentions_library.

Settings are read from MENTIONS_* environment variables or a .env file.

Public Interface:
    - MentionsSettings: Settings model
"""

from .settings import MentionsSettings

__all__ = [
    "MentionsSettings",
]
