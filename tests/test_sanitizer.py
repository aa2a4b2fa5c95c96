from __future__ import annotations

import pytest

from core.speech.sanitizer import MAX_SPEECH_CHARS, sanitize_for_speech

FORBIDDEN = set("*#[]<>&")


def test_markdown_link_and_emphasis_are_removed() -> None:
    text = "Hello *world* [link](http://example.com) & more"
    # The link label survives; only the brackets and the (http...) target go.
    assert sanitize_for_speech(text) == "Hello world link and more"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("## Heading\n\nBody", "Heading Body"),
        ("**bold** and __under__", "bold and __under__"),
        ("a <b> c", "a b c"),
        ("see (https://x.io/a?b=c) now", "see now"),
        ("see (ftp://x.io) now", "see (ftp://x.io) now"),
        ("Tom & Jerry && co", "Tom and Jerry andand co"),
        ("  spaced \t\n out  ", "spaced out"),
        ("", ""),
        ("plain sentence.", "plain sentence."),
    ],
)
def test_rules(raw: str, expected: str) -> None:
    assert sanitize_for_speech(raw) == expected


def test_none_is_empty() -> None:
    assert sanitize_for_speech(None) == ""


def test_output_has_no_forbidden_characters() -> None:
    raw = "*#[]<>&" * 50 + " # [x](http://a) <tag> & *y* "
    cleaned = sanitize_for_speech(raw)
    assert not FORBIDDEN & set(cleaned)


@pytest.mark.parametrize(
    "raw",
    [
        "Hello *world* [link](http://example.com) & more",
        "### Title\n* item one\n* item two",
        "<speak>a & b</speak>",
        "nothing to do",
    ],
)
def test_idempotent(raw: str) -> None:
    once = sanitize_for_speech(raw)
    assert sanitize_for_speech(once) == once


def test_truncates_to_speech_ceiling() -> None:
    assert len(sanitize_for_speech("x" * 10000)) == MAX_SPEECH_CHARS == 6000


def test_custom_ceiling() -> None:
    assert sanitize_for_speech("abcdef", max_chars=3) == "abc"


def test_link_hidden_behind_angle_bracket_survives_first_pass() -> None:
    # Links are matched before angle brackets are removed, so "(<http" only
    # becomes a link target on the second pass.
    once = sanitize_for_speech("see (<http://x.io) now")

    assert once == "see (http://x.io) now"
    assert sanitize_for_speech(once) == "see now"
