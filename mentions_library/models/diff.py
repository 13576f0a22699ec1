"""Change records produced by a character differ."""

from enum import Enum

from pydantic import computed_field

from mentions_library.models.base import FrozenModel


class DiffKind(str, Enum):
    """Kind of a change record.

    - EQUAL: characters carried over unchanged
    - INSERT: characters present only in the changed string
    - DELETE: characters present only in the original string
    """

    EQUAL = "equal"
    INSERT = "insert"
    DELETE = "delete"


class DiffChange(FrozenModel):
    """One run of a character diff."""

    kind: DiffKind
    value: str

    @computed_field  # type: ignore[misc]
    @property
    def count(self) -> int:
        """Number of characters in the run."""
        return len(self.value)
