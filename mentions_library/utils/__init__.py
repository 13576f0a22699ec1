"""Mention token utilities."""

from .mentions import MENTION_PATTERN
from .mentions import find_mentions
from .mentions import get_mention_value
from .mentions import has_mentions
from .mentions import replace_mention_values

__all__ = [
    "MENTION_PATTERN",
    "find_mentions",
    "get_mention_value",
    "has_mentions",
    "replace_mention_values",
]
