"""Markup normalizer: reduce a block's inner markup to author-entered content.

Steps, applied in order to the previous step's output:
1. Remove `class="..."` attributes. Custom class names are caught by the
   attribute check, so they do not count as content here.
2. Remove empty `alt=""` attributes, which default image blocks carry.
   Non-empty alt text is authored content and stays.
3. Remove tags without attributes (opening, closing or self-closing).
4. Trim surrounding whitespace.

Whatever is left was put there by the author. Steps 1-2 must run before 3:
stripping them can leave a bare tag (``<img alt=""/>`` -> ``<img />``)
that step 3 then removes. Tags that still carry attributes, such as a link
with an ``href``, survive; their bare closing tags do not.

The pass repeats until the text stops changing, so a removal that exposes a
new match (``<<b>i>``) is also stripped and the result is a fixed point.

This is a regex heuristic, not an HTML parser, and that boundary is the
point: it separates default wrapper markup from intentional markup.

Examples
--------
>>> normalize_markup('<figure class="wp-block-image"><img alt=""/></figure>')
''
>>> normalize_markup('<p><a href="/x">text</a></p>')
'<a href="/x">text'
"""

from __future__ import annotations

import re

_CLASS_ATTR = re.compile(r'class="[^"]*"')
_EMPTY_ALT = re.compile(r'alt=""')
_BARE_TAG = re.compile(r"</?[a-zA-Z]+\s*/?>")

_STRIP_ORDER: tuple[re.Pattern[str], ...] = (_CLASS_ATTR, _EMPTY_ALT, _BARE_TAG)


def normalize_markup(raw: str) -> str:
    """Strip decorative markup from ``raw`` and return what remains, trimmed."""
    text = raw
    while True:
        stripped = text
        for pattern in _STRIP_ORDER:
            stripped = pattern.sub("", stripped)
        stripped = stripped.strip()
        if stripped == text:
            return stripped
        text = stripped


__all__ = ["normalize_markup"]
