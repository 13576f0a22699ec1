"""Models for parsed mention text.

Rendered coordinates count characters of the plain text, where every mention
token is shown as trigger + name. Encoded coordinates count characters of the
raw value with `@[name](id)` tokens.
"""

from typing import Self

from pydantic import Field
from pydantic import model_validator

from mentions_library.models.base import FrozenModel


class MentionData(FrozenModel):
    """A mention token matched in encoded text."""

    original: str = Field(description="Exact matched token, e.g. @[Alice](42)")
    name: str = Field(description="Display name")
    id: str = Field(description="Numeric identifier (may be empty)")


class Suggestion(FrozenModel):
    """A mention candidate chosen by the user, before encoding."""

    id: str
    name: str


class Position(FrozenModel):
    """Half-open range [start, end) in rendered coordinates."""

    start: int = Field(ge=0)
    end: int = Field(ge=0)

    @model_validator(mode="after")
    def check_order(self) -> Self:
        if self.end < self.start:
            raise ValueError(f"end ({self.end}) must not precede start ({self.start})")
        return self


class Part(FrozenModel):
    """One contiguous rendered segment: free text or a mention label.

    For mention parts `data` holds the matched token and `text` is the
    trigger followed by the mention name.
    """

    text: str
    position: Position
    data: MentionData | None = None

    @model_validator(mode="after")
    def check_length(self) -> Self:
        if self.position.end - self.position.start != len(self.text):
            raise ValueError(
                f"position {self.position.start}..{self.position.end} does not span text of length {len(self.text)}"
            )
        return self

    @property
    def is_mention(self) -> bool:
        return self.data is not None


class PartsResult(FrozenModel):
    """Result of tokenizing an encoded value."""

    parts: list[Part] = Field(default_factory=list)
    plain_text: str = ""


class AddedFragment(FrozenModel):
    """Text inserted at `start` in the original string's coordinates."""

    start: int = Field(ge=0)
    value: str


class ChangePositions(FrozenModel):
    """Deleted ranges and inserted fragments, relative to the original string."""

    deleted: list[Position] = Field(default_factory=list)
    added: list[AddedFragment] = Field(default_factory=list)
