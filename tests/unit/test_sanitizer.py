"""Tests for sanitizer module."""

import pytest

from powerbi_reporter.sanitizer import sanitize


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("plain name", "plain name"),
        ("it's", "it|'s"),
        ("a|b", "a||b"),
        ("[list]", "|[list|]"),
        ("'|[]", "|'|||[|]"),
        ("", ""),
    ],
)
def test_escapes_reserved_characters(raw: str, expected: str) -> None:
    """Prefixes every reserved character with a pipe."""
    assert sanitize(raw) == expected


def test_replaces_only_first_newline() -> None:
    """Rewrites the first newline and keeps later ones raw."""
    assert sanitize("a\nb\nc") == "a|nb\nc"


def test_replaces_only_first_carriage_return() -> None:
    """Rewrites the first carriage return and keeps later ones raw."""
    assert sanitize("a\rb\rc") == "a|rb\rc"


def test_newline_escape_is_not_escaped_again() -> None:
    """Pipes inserted for line breaks are not doubled."""
    assert sanitize("x\r\n") == "x|r|n"


def test_latin1_characters_are_kept() -> None:
    """Leaves characters below U+0100 untouched."""
    assert sanitize("café ÿ") == "café ÿ"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Ā", "| 0x0100"),
        ("日本", "| 0x65e5| 0x672c"),
        ("ok \U0001f600", "ok | 0x1f600"),
    ],
)
def test_encodes_wide_characters(raw: str, expected: str) -> None:
    """Renders characters from U+0100 upwards as hex code points."""
    assert sanitize(raw) == expected


def test_applies_all_steps_together() -> None:
    """Combines escaping, line break rewriting and code point encoding."""
    assert sanitize("[Ω]\n'x'\n") == "|[| 0x03a9|]|n|'x|'\n"
