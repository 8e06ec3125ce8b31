"""
------------------------------------------------------------------------------
Project:        SwissPayCode
File:           tests/unit/test_sanitizer.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Unit tests for the Latin-1 text sanitizer.
------------------------------------------------------------------------------
"""

import pytest
from swisspaycode.utils.sanitizer import sanitize, sanitize_for_display, truncate

def test_line_breaks_become_spaces():
    assert sanitize("Muster\r\nAG") == "Muster AG"
    assert sanitize("a\tb\nc") == "a b c"

def test_control_characters_replaced():
    """Both C0 and C1 control ranges are removed."""
    assert sanitize("A\x00B\x1fC\x7fD\x85E\x9fF") == "A B C D E F"

def test_non_latin_characters_replaced():
    assert sanitize("Café \U0001F600 Zürich") == "Café Zürich"
    assert sanitize("Price € 10") == "Price 10"

def test_latin1_extended_survives():
    text = "Ærø Ñandú ßüöä ¿½"
    assert sanitize(text) == text

def test_whitespace_collapsed_and_trimmed():
    assert sanitize("   Bahnhof   strasse  ") == "Bahnhof strasse"

def test_empty_and_none():
    assert sanitize("") == ""
    assert sanitize(None) == ""
    assert sanitize(" \n\t ") == ""

@pytest.mark.parametrize("text", [
    "plain",
    "  lots   of \n\n space ",
    "\x00\x01mixed   text\U0001F680",
    "Zürich\r\n8001",
    " leading nbsp",
    "",
])
def test_sanitize_is_idempotent(text):
    once = sanitize(text)
    assert sanitize(once) == once

def test_truncate_measures_sanitized_text():
    """Length limits apply after cleaning, not to the raw input."""
    assert truncate("  A\n\nB  ", 3) == "A B"
    assert truncate("abcdef", 4) == "abcd"
    assert truncate(None, 10) == ""

def test_display_variant_keeps_newlines_and_tabs():
    assert sanitize_for_display("Line 1\nLine 2\tTab") == "Line 1\nLine 2\tTab"

def test_display_variant_drops_instead_of_replacing():
    assert sanitize_for_display("A\x00B\U0001F600C\r") == "ABC"
