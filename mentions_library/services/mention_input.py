"""Service for working with the value of a mentions text input.

Binds the configured trigger and diff timeout to the parsing and diffing
functions so host applications don't have to thread them through every call.
"""

import logging
from collections.abc import Callable
from functools import partial
from typing import Any

from mentions_library.config.settings import MentionsSettings
from mentions_library.diffing.changes import CharacterDiffer
from mentions_library.diffing.changes import apply_text_change
from mentions_library.diffing.changes import diff_chars
from mentions_library.diffing.changes import get_changed_positions
from mentions_library.models.parts import ChangePositions
from mentions_library.models.parts import MentionData
from mentions_library.models.parts import Part
from mentions_library.models.parts import PartsResult
from mentions_library.parsing.parts import get_parts
from mentions_library.parsing.parts import get_value
from mentions_library.utils.mentions import get_mention_value
from mentions_library.utils.mentions import replace_mention_values

logger = logging.getLogger(__name__)


class MentionInputService:
    """Parses, encodes and diffs mention text using configured settings."""

    def __init__(
        self: "MentionInputService",
        settings: MentionsSettings | None = None,
        differ: CharacterDiffer | None = None,
    ) -> None:
        """Initialize service.

        Args:
            settings: Settings to use (defaults from environment if None)
            differ: Optional character differ (diff_chars with the configured timeout if None)
        """
        self.settings = settings or MentionsSettings()
        self.differ = differ or partial(diff_chars, timeout=self.settings.diff_timeout)

    @property
    def trigger(self: "MentionInputService") -> str:
        return self.settings.trigger

    def parse(self: "MentionInputService", value: str | None) -> PartsResult:
        """Split an encoded value into rendered parts."""
        return get_parts(self.trigger, value)

    def to_value(self: "MentionInputService", parts: list[Part]) -> str:
        """Rebuild the encoded value from parts.

        Args:
            parts: Parts as returned by parse()

        Returns:
            Encoded value with mention parts restored to their tokens
        """
        return get_value(parts)

    def encode(self: "MentionInputService", suggestion: Any) -> str:
        """Encode a chosen suggestion as a mention token.

        Args:
            suggestion: Suggestion model, mapping or object with `name` and `id`

        Returns:
            Token `@[name](id)` ready to insert into a value
        """
        return get_mention_value(suggestion)

    def replace_mentions(self: "MentionInputService", value: str, replacer: Callable[[MentionData], str]) -> str:
        """Replace every mention token in an encoded value.

        Args:
            value: Encoded value
            replacer: Function mapping a mention to its replacement string

        Returns:
            Value with all tokens replaced, other text untouched
        """
        return replace_mention_values(value, replacer)

    def changed_positions(self: "MentionInputService", original_text: str, changed_text: str) -> ChangePositions:
        """Find what changed between two rendered texts."""
        return get_changed_positions(original_text, changed_text, self.differ)

    def apply_change(self: "MentionInputService", value: str | None, changed_plain_text: str) -> str:
        """Apply an edit of the rendered text to an encoded value.

        Args:
            value: Encoded value before the edit
            changed_plain_text: Rendered text after the edit

        Returns:
            Encoded value after the edit
        """
        parsed = self.parse(value)
        if parsed.plain_text == changed_plain_text:
            logger.debug("Rendered text unchanged, keeping value")
            return value or ""

        new_value = apply_text_change(parsed.parts, parsed.plain_text, changed_plain_text, self.differ)
        logger.debug(f"Applied edit: {len(parsed.plain_text)} -> {len(changed_plain_text)} rendered characters")
        return new_value
