"""Parsing of encoded mention text into rendered parts."""

from .parts import get_mention_part
from .parts import get_part
from .parts import get_parts
from .parts import get_parts_interval
from .parts import get_value

__all__ = [
    "get_mention_part",
    "get_part",
    "get_parts",
    "get_parts_interval",
    "get_value",
]
