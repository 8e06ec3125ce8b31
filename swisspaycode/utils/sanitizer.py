"""
------------------------------------------------------------------------------
Project:        SwissPayCode
File:           swisspaycode/utils/sanitizer.py
Version:        1.0.0
Producer:       thorsten.schnebeck@gmx.net
Generator:      Antigravity
Description:    Restricts free text to the Latin-1 subset allowed by the Swiss
                Payment Standards. The strict variant feeds the payload, the
                lenient variant the human readable part of the slip.
------------------------------------------------------------------------------
"""

import re
from typing import Optional

# 0x00-0x1F and 0x7F-0x9F
CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f-\x9f]")
# Everything outside 0x20-0x7E and 0xA0-0xFF
NON_LATIN_CHARS = re.compile(r"[^\x20-\x7e\xa0-\xff]")
WHITESPACE_RUN = re.compile(r"\s+")

# Display text keeps \t (0x09) and \n (0x0A)
DISPLAY_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b-\x1f\x7f-\x9f]")
DISPLAY_DISALLOWED_CHARS = re.compile(r"[^\t\n\x20-\x7e\xa0-\xff]")


def sanitize(text: Optional[str]) -> str:
    """
    Cleans a free-text field for the payment code payload.

    1. Control characters (incl. line breaks) become spaces.
    2. Characters outside the allowed Latin-1 subset become spaces.
    3. Whitespace runs collapse to one space.
    4. Leading/trailing whitespace is removed.

    Args:
        text: Raw user input. None is treated as empty.

    Returns:
        The sanitized string (possibly empty).
    """
    if not text:
        return ""

    cleaned = CONTROL_CHARS.sub(" ", text)
    cleaned = NON_LATIN_CHARS.sub(" ", cleaned)
    cleaned = WHITESPACE_RUN.sub(" ", cleaned)
    return cleaned.strip()


def sanitize_for_display(text: Optional[str]) -> str:
    """
    Less strict cleaning for rendered text. Newlines and tabs survive so
    multi-line blocks keep their shape; everything else that cannot be
    printed is dropped.
    """
    if not text:
        return ""

    cleaned = DISPLAY_CONTROL_CHARS.sub("", text)
    cleaned = DISPLAY_DISALLOWED_CHARS.sub("", cleaned)
    return cleaned.strip()


def truncate(text: Optional[str], max_length: int) -> str:
    """Sanitizes and cuts the text to max_length characters."""
    return sanitize(text)[:max_length]
