"""Sanitisation helpers.

Free-text fields such as alert and route descriptions are displayed
verbatim on the public dashboard. Tags are stripped from them before
they are stored so that a description can never carry markup.
"""
import re

TAG_RE = re.compile(r"<[^>]+>")


def strip_tags(text: str) -> str:
    """Remove HTML tags from ``text`` and trim surrounding whitespace.

    Returns an empty string for ``None`` or empty input.
    """
    if not text:
        return ""
    return TAG_RE.sub("", text).strip()
