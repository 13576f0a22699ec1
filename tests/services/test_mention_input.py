"""Test MentionInputService."""

from pathlib import Path

import pytest

from mentions_library.config.settings import MentionsSettings
from mentions_library.models.diff import DiffChange
from mentions_library.models.diff import DiffKind
from mentions_library.models.parts import AddedFragment
from mentions_library.models.parts import Position
from mentions_library.models.parts import Suggestion
from mentions_library.services.mention_input import MentionInputService


class TestMentionInputService:
    """Test MentionInputService class."""

    @pytest.fixture
    def service(self) -> MentionInputService:
        """Service rendering mentions with a '#' trigger."""
        return MentionInputService(MentionsSettings(trigger="#"))

    def test_parse_uses_configured_trigger(self, service: MentionInputService) -> None:
        result = service.parse("Hi @[Bob](7)!")
        assert result.plain_text == "Hi #Bob!"

    def test_to_value_inverts_parse(self, service: MentionInputService) -> None:
        value = "Hi @[Bob](7)!"
        assert service.to_value(service.parse(value).parts) == value

    def test_encode(self, service: MentionInputService) -> None:
        assert service.encode(Suggestion(id="42", name="Alice")) == "@[Alice](42)"

    def test_replace_mentions(self, service: MentionInputService) -> None:
        assert service.replace_mentions("Hi @[Bob](7)!", lambda m: f"<@{m.id}>") == "Hi <@7>!"

    def test_changed_positions(self, service: MentionInputService) -> None:
        positions = service.changed_positions("abcdef", "abf")
        assert positions.deleted == [Position(start=2, end=5)]

    def test_apply_change_keeps_untouched_mention(self, service: MentionInputService) -> None:
        assert service.apply_change("Hi @[Bob](7)!", "Hi #Bob!!") == "Hi @[Bob](7)!!"

    def test_apply_change_without_edit_returns_value(self, service: MentionInputService) -> None:
        assert service.apply_change("Hi @[Bob](7)!", "Hi #Bob!") == "Hi @[Bob](7)!"

    def test_apply_change_to_empty_value(self, service: MentionInputService) -> None:
        assert service.apply_change(None, "hello") == "hello"

    def test_default_settings(self, clean_settings_env: Path) -> None:
        service = MentionInputService()
        assert service.trigger == "@"

    def test_custom_differ_is_used(self) -> None:
        calls: list[tuple[str, str]] = []

        def differ(original_text: str, changed_text: str) -> list[DiffChange]:
            calls.append((original_text, changed_text))
            return [
                DiffChange(kind=DiffKind.INSERT, value="x"),
                DiffChange(kind=DiffKind.EQUAL, value=original_text),
            ]

        service = MentionInputService(differ=differ)
        positions = service.changed_positions("ab", "xab")

        assert calls == [("ab", "xab")]
        assert positions.added == [AddedFragment(start=0, value="x")]
