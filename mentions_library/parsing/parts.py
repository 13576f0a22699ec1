"""Decomposition of encoded mention text into rendered parts.

`get_parts` splits an encoded value into plain and mention parts laid out in
rendered coordinates; `get_value` is its exact inverse:

    get_value(get_parts(trigger, value).parts) == value
"""

import logging

from mentions_library.models.parts import MentionData
from mentions_library.models.parts import Part
from mentions_library.models.parts import PartsResult
from mentions_library.models.parts import Position
from mentions_library.utils.mentions import MENTION_PATTERN
from mentions_library.utils.mentions import mention_from_match

logger = logging.getLogger(__name__)


def get_part(text: str, position_offset: int = 0) -> Part:
    """Build a plain text part starting at `position_offset`."""
    return Part(
        text=text,
        position=Position(start=position_offset, end=position_offset + len(text)),
    )


def get_mention_part(trigger: str, mention: MentionData, position_offset: int = 0) -> Part:
    """Build a mention part rendered as trigger + name."""
    text = f"{trigger}{mention.name}"

    return Part(
        text=text,
        position=Position(start=position_offset, end=position_offset + len(text)),
        data=mention,
    )


def get_parts(trigger: str, value: str | None) -> PartsResult:
    """Split an encoded value into rendered parts.

    Args:
        trigger: Prefix rendered before every mention name (e.g. "@")
        value: Encoded text; None is treated as empty

    Returns:
        Parts ordered by position, contiguous from 0, with empty parts
        dropped, plus the concatenated plain text

    Example:
        >>> result = get_parts("@", "Hi @[Bob](7)!")
        >>> result.plain_text
        'Hi @Bob!'
        >>> [part.text for part in result.parts]
        ['Hi ', '@Bob', '!']
    """
    value = value or ""
    matches = list(MENTION_PATTERN.finditer(value))

    # Without mentions the whole value is one plain part
    if not matches:
        return PartsResult(parts=[get_part(value, 0)] if value else [], plain_text=value)

    parts: list[Part] = []
    plain_text = ""

    # Text before the first mention
    if matches[0].start() != 0:
        text = value[: matches[0].start()]
        parts.append(get_part(text, 0))
        plain_text += text

    for index, match in enumerate(matches):
        mention_part = get_mention_part(trigger, mention_from_match(match), len(plain_text))
        parts.append(mention_part)
        plain_text += mention_part.text

        if match.end() != len(value):
            is_last = index == len(matches) - 1
            text = value[match.end() : None if is_last else matches[index + 1].start()]

            parts.append(get_part(text, len(plain_text)))
            plain_text += text

    logger.debug(f"Parsed {len(matches)} mention(s) into {len(parts)} part(s)")

    # Adjacent mentions leave empty gaps behind
    return PartsResult(parts=[part for part in parts if part.text], plain_text=plain_text)


def get_value(parts: list[Part]) -> str:
    """Rebuild the encoded value from parts.

    Mention parts contribute their original token, plain parts their text.

    Example:
        >>> get_value(get_parts("@", "Hi @[Bob](7)!").parts)
        'Hi @[Bob](7)!'
    """
    return "".join(part.data.original if part.data else part.text for part in parts)


def get_parts_interval(parts: list[Part], cursor: int, count: int) -> list[Part]:
    """Get the parts covering rendered range [cursor, cursor + count).

    Parts lying wholly inside the range are returned as they are. A part cut
    by either end of the range is replaced with a plain part holding only the
    covered text at its rendered position, so a partially covered mention
    becomes plain text.

    Args:
        parts: Parts as returned by get_parts
        cursor: Start of the range in rendered coordinates
        count: Length of the range

    Returns:
        Parts for the range, empty if either end lies outside the parts
    """
    new_cursor = cursor + count

    current_index = next(
        (i for i, part in enumerate(parts) if part.position.start <= cursor < part.position.end),
        None,
    )
    new_index = next(
        (i for i, part in enumerate(parts) if part.position.start < new_cursor <= part.position.end),
        None,
    )
    if current_index is None or new_index is None:
        return []

    current_part = parts[current_index]
    new_part = parts[new_index]
    interval: list[Part] = []

    # Whole first part, or the covered slice of it
    if current_part.position.start == cursor and current_part.position.end <= new_cursor:
        interval.append(current_part)
    else:
        offset = cursor - current_part.position.start
        interval.append(get_part(current_part.text[offset : offset + count], cursor))

    if new_index > current_index:
        interval.extend(parts[current_index + 1 : new_index])

        # Whole last part, or its covered head
        if new_part.position.end == new_cursor and new_part.position.start >= cursor:
            interval.append(new_part)
        else:
            interval.append(get_part(new_part.text[: new_cursor - new_part.position.start], new_part.position.start))

    return interval
