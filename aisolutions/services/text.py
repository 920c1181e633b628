"""
Text Helpers

Slugs for blog URLs and the comma-joined form representation of list fields.
"""

import re
from slugify import slugify as _slugify

# ASCII word characters only, so accented letters are dropped rather than transliterated
_NON_SLUG_CHARS = re.compile(r'[^\w\s-]', re.ASCII)


def slugify(title):
    """URL-safe slug: lowercase, punctuation dropped, whitespace runs become one hyphen.

    >>> slugify('Hello, World!  Title')
    'hello-world-title'
    >>> slugify('Node.js Tips')
    'nodejs-tips'
    """
    text = _NON_SLUG_CHARS.sub('', (title or '').lower())
    return _slugify(text, regex_pattern=r'[^\w-]+')


def split_csv(text):
    """Split a comma-joined form value into trimmed, non-empty items."""
    if not text:
        return []
    return [item.strip() for item in text.split(',') if item.strip()]


def join_csv(items):
    """Inverse of split_csv for editing: ['ai', 'web dev'] -> 'ai, web dev'."""
    return ', '.join(items or [])
