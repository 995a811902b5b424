import re
from typing import FrozenSet

_SPACE_OR_HYPHEN = re.compile(r"[\s-]")
_WHITESPACE = re.compile(r"\s+")


def variants_of(keyword: str) -> FrozenSet[str]:
    """
    Spellings of ``keyword`` accepted as a match.

    Covers superficial variation only ("Node.js" / "nodejs" / "node"); there is
    no tokenization or stemming.
    """
    lowered = keyword.lower()
    return frozenset(
        {
            lowered,
            _SPACE_OR_HYPHEN.sub("", lowered),
            lowered.removesuffix(".js"),
            lowered.removesuffix(".net"),
        }
    )


def contains_keyword(haystack_lower: str, keyword: str) -> bool:
    """
    True if any variant of ``keyword`` is a substring of ``haystack_lower``.

    Plain substring containment, so "java" also matches inside "javascript".
    """
    for variant in variants_of(keyword):
        if variant in haystack_lower or _WHITESPACE.sub("", variant) in haystack_lower:
            return True
    return False
