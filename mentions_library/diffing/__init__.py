"""Character diffing mapped back onto mention text."""

from .changes import CharacterDiffer
from .changes import DiffContractError
from .changes import apply_text_change
from .changes import diff_chars
from .changes import get_changed_positions

__all__ = [
    "CharacterDiffer",
    "DiffContractError",
    "apply_text_change",
    "diff_chars",
    "get_changed_positions",
]
