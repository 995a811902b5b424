from dataclasses import dataclass
from typing import Iterable, Tuple

from .normalizer import contains_keyword


@dataclass(frozen=True)
class MatchResult:
    matched: Tuple[str, ...] = ()
    missing: Tuple[str, ...] = ()


def match_keywords(resume_text: str, keywords: Iterable[str]) -> MatchResult:
    """
    Split ``keywords`` into those found in ``resume_text`` and those absent.

    Both halves keep the input order and the original keyword casing.
    """
    haystack = resume_text.lower()
    matched = []
    missing = []
    for keyword in keywords:
        if contains_keyword(haystack, keyword):
            matched.append(keyword)
        else:
            missing.append(keyword)
    return MatchResult(matched=tuple(matched), missing=tuple(missing))
