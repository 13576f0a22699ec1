"""Mention-aware text parsing and diffing.

Encoded values embed mentions as `@[name](id)` tokens. This library splits
them into rendered parts, rebuilds them, and maps character diffs of the
rendered text back onto them.

Public Interface:
    Modules:
    - models: Immutable value objects (parts, positions, change records)
    - utils: Mention token recognition, encoding and replacement
    - parsing: Tokenizer and value reconstruction
    - diffing: Character diffs and edit application
    - services: Settings-aware facade
    - config: Settings loading
"""

from .diffing import DiffContractError
from .diffing import apply_text_change
from .diffing import diff_chars
from .diffing import get_changed_positions
from .models import AddedFragment
from .models import ChangePositions
from .models import MentionData
from .models import Part
from .models import PartsResult
from .models import Position
from .models import Suggestion
from .parsing import get_mention_part
from .parsing import get_part
from .parsing import get_parts
from .parsing import get_parts_interval
from .parsing import get_value
from .services import MentionInputService
from .utils import MENTION_PATTERN
from .utils import get_mention_value
from .utils import replace_mention_values

__all__ = [
    "MENTION_PATTERN",
    "AddedFragment",
    "ChangePositions",
    "DiffContractError",
    "MentionData",
    "MentionInputService",
    "Part",
    "PartsResult",
    "Position",
    "Suggestion",
    "apply_text_change",
    "diff_chars",
    "get_changed_positions",
    "get_mention_part",
    "get_mention_value",
    "get_part",
    "get_parts",
    "get_parts_interval",
    "get_value",
    "replace_mention_values",
]
