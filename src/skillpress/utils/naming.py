"""Display title and anchor derivation for fragment identifiers."""

from __future__ import annotations

from skillpress.constants.naming import ANCHOR_UNSAFE_PATTERN, WORD_START_PATTERN


def derive_title(identifier: str) -> str:
    """Turn a fragment identifier such as ``getting-started`` into ``Getting Started``.

    Hyphens become spaces and the first character of every whitespace-delimited
    word is upper-cased. The rest of each word is left as written.
    """
    spaced = identifier.replace("-", " ")
    return WORD_START_PATTERN.sub(lambda match: match.group(1) + match.group(2).upper(), spaced)


def derive_anchor(identifier: str) -> str:
    """Return the in-document link target for a fragment identifier."""
    return ANCHOR_UNSAFE_PATTERN.sub("-", identifier.lower())
