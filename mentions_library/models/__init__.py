"""Models for mentions_library."""

from .diff import DiffChange
from .diff import DiffKind
from .parts import AddedFragment
from .parts import ChangePositions
from .parts import MentionData
from .parts import Part
from .parts import PartsResult
from .parts import Position
from .parts import Suggestion

__all__ = [
    "AddedFragment",
    "ChangePositions",
    "DiffChange",
    "DiffKind",
    "MentionData",
    "Part",
    "PartsResult",
    "Position",
    "Suggestion",
]
