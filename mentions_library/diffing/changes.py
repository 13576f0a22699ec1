"""Character diffs between two versions of a text.

The differ is pluggable: any callable taking the original and changed strings
and returning DiffChange records in order satisfies CharacterDiffer. The
default wraps diff-match-patch's Myers diff.
"""

import logging
from collections.abc import Callable

from diff_match_patch import diff_match_patch

from mentions_library.models.diff import DiffChange
from mentions_library.models.diff import DiffKind
from mentions_library.models.parts import AddedFragment
from mentions_library.models.parts import ChangePositions
from mentions_library.models.parts import Part
from mentions_library.models.parts import Position
from mentions_library.parsing.parts import get_part
from mentions_library.parsing.parts import get_parts_interval
from mentions_library.parsing.parts import get_value

logger = logging.getLogger(__name__)

CharacterDiffer = Callable[[str, str], list[DiffChange]]

_OPERATIONS = {
    diff_match_patch.DIFF_EQUAL: DiffKind.EQUAL,
    diff_match_patch.DIFF_INSERT: DiffKind.INSERT,
    diff_match_patch.DIFF_DELETE: DiffKind.DELETE,
}


class DiffContractError(Exception):
    """Raised when a differ's records do not describe the original string."""


def diff_chars(original_text: str, changed_text: str, timeout: float = 0.0) -> list[DiffChange]:
    """Compute a character-level diff.

    Args:
        original_text: Text before the change
        changed_text: Text after the change
        timeout: Seconds to spend before accepting a non-minimal diff (0 = no deadline)

    Returns:
        Ordered change records

    Example:
        >>> [(c.kind.value, c.value) for c in diff_chars("ab", "aXb")]
        [('equal', 'a'), ('insert', 'X'), ('equal', 'b')]
    """
    dmp = diff_match_patch()
    dmp.Diff_Timeout = timeout
    diffs = dmp.diff_main(original_text, changed_text, False)
    return [DiffChange(kind=_OPERATIONS[operation], value=text) for operation, text in diffs]


def _check_consumed(original_text: str, consumed: int) -> None:
    if consumed != len(original_text):
        raise DiffContractError(
            f"Diff covered {consumed} character(s) of an original text of length {len(original_text)}"
        )


def get_changed_positions(
    original_text: str,
    changed_text: str,
    differ: CharacterDiffer | None = None,
) -> ChangePositions:
    """Find deleted ranges and added fragments between two strings.

    Positions refer to the original string. Deleted and unchanged runs move
    the cursor; added runs are reported at the cursor without moving it.
    Records are reduced in the order the differ produced them.

    Args:
        original_text: Text before the change
        changed_text: Text after the change
        differ: Character differ (default: diff_chars)

    Returns:
        Deleted and added positions relative to the original string

    Raises:
        DiffContractError: If the differ's records don't cover the original text

    Example:
        >>> get_changed_positions("abcdef", "abf").deleted
        [Position(start=2, end=5)]
    """
    changes = (differ or diff_chars)(original_text, changed_text)

    deleted: list[Position] = []
    added: list[AddedFragment] = []
    original_cursor = 0

    for change in changes:
        if change.kind is DiffKind.DELETE:
            deleted.append(Position(start=original_cursor, end=original_cursor + change.count))
            original_cursor += change.count
        elif change.kind is DiffKind.INSERT:
            added.append(AddedFragment(start=original_cursor, value=change.value))
        else:
            original_cursor += change.count

    _check_consumed(original_text, original_cursor)

    logger.debug(f"Diff found {len(deleted)} deletion(s) and {len(added)} addition(s)")
    return ChangePositions(deleted=deleted, added=added)


def apply_text_change(
    parts: list[Part],
    original_text: str,
    changed_text: str,
    differ: CharacterDiffer | None = None,
) -> str:
    """Build the encoded value after an edit to the rendered text.

    Unchanged runs keep the parts they cover, so mentions outside the edit
    survive. Deleted runs are dropped and added runs become plain text. A
    mention cut by an edit degrades to the plain text left of its label.

    Args:
        parts: Parts of the value before the edit (see get_parts)
        original_text: Rendered text before the edit
        changed_text: Rendered text after the edit
        differ: Character differ (default: diff_chars)

    Returns:
        Encoded value matching changed_text

    Raises:
        DiffContractError: If the differ's records don't cover the original text

    Example:
        >>> parts = get_parts("@", "Hi @[Bob](7)!").parts
        >>> apply_text_change(parts, "Hi @Bob!", "Hey @Bob!")
        'Hey @[Bob](7)!'
    """
    changes = (differ or diff_chars)(original_text, changed_text)

    new_parts: list[Part] = []
    cursor = 0

    for change in changes:
        if change.kind is DiffKind.DELETE:
            cursor += change.count
        elif change.kind is DiffKind.INSERT:
            new_parts.append(get_part(change.value))
        elif change.count:
            new_parts.extend(get_parts_interval(parts, cursor, change.count))
            cursor += change.count

    _check_consumed(original_text, cursor)

    return get_value(new_parts)
