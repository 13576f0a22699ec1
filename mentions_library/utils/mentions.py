"""Utilities for encoding and recognizing mention tokens.

A mention is stored in encoded text as `@[name](id)`:
- name: any characters except line terminators, matched greedily
- id: zero or more digits

Example:
    "Hi @[Bob](7)!" holds one mention named "Bob" with id "7".
"""

import re
from collections.abc import Callable
from collections.abc import Mapping
from typing import Any

from mentions_library.models.parts import MentionData

# Characters a mention name never spans: \n, \r, U+2028, U+2029
LINE_TERMINATORS = "\n\r\u2028\u2029"

# Pattern to match encoded mentions: @[name](id)
# The name group is greedy, so on one line "@[A](1) and @[B](2)" is a single
# mention named "A](1) and @[B". Encoders must stay in lockstep with this.
MENTION_PATTERN = re.compile(
    rf"(?P<original>@\[(?P<name>[^{LINE_TERMINATORS}]+)\]\((?P<id>[0-9]*)\))",
    re.IGNORECASE,
)


def mention_from_match(match: re.Match[str]) -> MentionData:
    """Build a MentionData from a MENTION_PATTERN match."""
    return MentionData(
        original=match.group("original"),
        name=match.group("name"),
        id=match.group("id"),
    )


def find_mentions(value: str | None) -> list[MentionData]:
    """Extract all mention tokens from encoded text, left to right.

    Args:
        value: Encoded text (None is treated as empty)

    Returns:
        List of matched mentions

    Example:
        >>> [m.name for m in find_mentions("Hi @[Bob](7)!")]
        ['Bob']
    """
    return [mention_from_match(match) for match in MENTION_PATTERN.finditer(value or "")]


def has_mentions(value: str | None) -> bool:
    """Check if encoded text contains any mention token.

    Example:
        >>> has_mentions("Hi @[Bob](7)!")
        True
        >>> has_mentions("Hi @Bob!")
        False
    """
    return bool(MENTION_PATTERN.search(value or ""))


def get_mention_value(suggestion: Any) -> str:
    """Encode a suggestion as a mention token.

    Args:
        suggestion: Suggestion model, mapping or any object with `name` and `id`

    Returns:
        Encoded token `@[name](id)`

    Example:
        >>> get_mention_value({"id": "42", "name": "Alice"})
        '@[Alice](42)'
    """
    if isinstance(suggestion, Mapping):
        name, mention_id = suggestion["name"], suggestion["id"]
    else:
        name, mention_id = suggestion.name, suggestion.id
    return f"@[{name}]({mention_id})"


def replace_mention_values(value: str, replacer: Callable[[MentionData], str]) -> str:
    """Replace every mention token in encoded text.

    The replacer is called once per token, left to right, as tokens are
    found. Text outside tokens is left untouched.

    Args:
        value: Encoded text
        replacer: Function mapping a mention to its replacement string

    Returns:
        Text with all tokens replaced

    Example:
        >>> replace_mention_values("Hi @[Bob](7)!", lambda m: m.name)
        'Hi Bob!'
    """
    return MENTION_PATTERN.sub(lambda match: replacer(mention_from_match(match)), value)
