from __future__ import annotations

import re


# ECMAScript whitespace. Python's \s differs: it also matches \x1c-\x1f and \x85, and misses \ufeff.
_WS = r"\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"

_DISALLOWED = re.compile(rf"[^a-z0-9{_WS}-]")
_WHITESPACE = re.compile(rf"[{_WS}]+")
_HYPHENS = re.compile(r"-+")


def slugify(title: str) -> str:
    """Derive the canonical topic key from a title.

    "var vs. let vs. const" -> "var-vs-let-vs-const". A title made only of
    punctuation yields "".
    """
    text = title.lower()
    text = _DISALLOWED.sub("", text)
    text = _WHITESPACE.sub("-", text)
    text = _HYPHENS.sub("-", text)
    return text.strip("-").strip()
