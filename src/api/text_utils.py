# This file holds the text helpers applied to news fields before storage.
# Free text is stored as plain text: markup is stripped and entities are decoded,
# so stored values cannot carry script into a page and slugs see the real characters.
# Slugs are derived deterministically so the same title always yields the same key.

from __future__ import annotations

import html
import re

import nh3

SLUG_MAX_LENGTH = 200

_NON_SLUG_CHARS_RE = re.compile(r"[^a-z0-9]+")


def slugify(value: str) -> str:
    """Lowercase, trim, hyphenate runs of non-alphanumerics, and cap at 200 chars.

    >>> slugify("Hello World News!")
    'hello-world-news'
    """

    slug = _NON_SLUG_CHARS_RE.sub("-", value.lower().strip()).strip("-")
    return slug[:SLUG_MAX_LENGTH].rstrip("-")


def sanitize_text(value: str) -> str:
    """Remove all markup and return plain text with entities decoded.

    The bodies of <script> and <style> are dropped entirely. Cleaning repeats
    until decoding no longer changes the text, so an escaped tag such as
    ``&lt;script&gt;`` cannot come back out as markup.

    >>> sanitize_text("<b>Tom</b> & Jerry")
    'Tom & Jerry'
    """

    current = value
    while True:
        cleaned = html.unescape(nh3.clean(current, tags=set()))
        if cleaned == current:
            return cleaned.strip()
        current = cleaned
