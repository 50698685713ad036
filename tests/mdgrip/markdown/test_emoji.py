"""Tests for the emoji table and shortcode substitution."""

import pytest

from mdgrip.markdown.emoji import EMOJI, emoji_html, replace_emoji


class TestEmojiTable:
    def test_keys_include_colons(self):
        assert all(key.startswith(":") and key.endswith(":") for key in EMOJI)

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            EMOJI[":new_one:"] = "x"  # type: ignore[index]

    def test_glyph_value(self):
        assert emoji_html(":rocket:") == EMOJI[":rocket:"]
        assert not EMOJI[":rocket:"].startswith("/")

    def test_image_value(self):
        assert emoji_html(":octocat:") == (
            '<img class="emoji" title=":octocat:" alt=":octocat:" src="/static/emojis/octocat.png"'
            ' height="20" width="20" align="absmiddle">'
        )

    def test_unknown(self):
        assert emoji_html(":definitely_not_an_emoji:") is None


class TestReplaceEmoji:
    def test_known_shortcode(self):
        assert replace_emoji("Ship it :rocket: now") == f"Ship it {EMOJI[':rocket:']} now"

    def test_unknown_shortcode_left_verbatim(self):
        text = "keep :not_an_emoji_code: as is"
        assert replace_emoji(text) == text

    def test_multiple_shortcodes(self):
        assert replace_emoji(":+1: and :tada:") == f"{EMOJI[':+1:']} and {EMOJI[':tada:']}"

    def test_adjacent_shortcodes(self):
        assert replace_emoji(":smile::heart:") == EMOJI[":smile:"] + EMOJI[":heart:"]

    def test_unknown_before_known(self):
        assert replace_emoji("at 10::smile:") == "at 10:" + EMOJI[":smile:"]

    def test_time_like_text(self):
        assert replace_emoji("meet at 10:30:45") == "meet at 10:30:45"

    def test_whitespace_not_a_shortcode(self):
        assert replace_emoji("Note: see this: thing") == "Note: see this: thing"

    def test_empty_token(self):
        assert replace_emoji("a :: b") == "a :: b"

    def test_custom_emoji_becomes_image(self):
        result = replace_emoji("Go :shipit:")
        assert result.startswith('Go <img class="emoji"')
        assert 'src="/static/emojis/shipit.png"' in result

    def test_no_colons(self):
        assert replace_emoji("plain") == "plain"
