"""Services for mentions_library."""

from .mention_input import MentionInputService

__all__ = [
    "MentionInputService",
]
