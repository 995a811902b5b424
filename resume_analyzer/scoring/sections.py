"""
Heuristic resume section slicing.

A section starts at the first header synonym found in the text and runs up to
the next stop word (another section's keyword) or the end of the text. Header
probes are tried in priority order and the first one that matches wins.

Matching is done in two plain searches (header, then stop word from the end of
the header) so the running time stays linear in the resume length regardless
of its content.
"""

import logging
import re
from typing import Dict, Literal, Pattern, Tuple

logger = logging.getLogger(__name__)

SectionType = Literal["experience", "skills", "projects"]

_TRAILING_HEADERS = r"certificates?|awards?|languages?|interests?|references?"


def _compile(*alternatives: str) -> Pattern[str]:
    return re.compile("|".join(alternatives), re.IGNORECASE)


_HEADER_PROBES: Dict[str, Tuple[Pattern[str], ...]] = {
    "experience": (
        re.compile(r"(?:work\s+)?experience", re.IGNORECASE),
        re.compile(r"(?:professional\s+)?(?:work\s+)?history", re.IGNORECASE),
        re.compile(r"employment", re.IGNORECASE),
    ),
    "skills": (
        re.compile(r"(?:technical\s+)?skills", re.IGNORECASE),
        re.compile(r"(?:core\s+)?competencies", re.IGNORECASE),
        re.compile(r"technologies", re.IGNORECASE),
    ),
    "projects": (
        re.compile(r"projects?", re.IGNORECASE),
        re.compile(r"portfolio", re.IGNORECASE),
    ),
}

_STOP_WORDS: Dict[str, Pattern[str]] = {
    "experience": _compile("education", "skills", "projects", _TRAILING_HEADERS),
    "skills": _compile("experience", "education", "projects", _TRAILING_HEADERS),
    "projects": _compile("experience", "education", "skills", _TRAILING_HEADERS),
}


def extract_section(resume_text: str, section_type: SectionType) -> str:
    """
    Return the ``section_type`` slice of ``resume_text``.

    Falls back to the whole text when no header is found or the section type
    is unknown; never raises.
    """
    probes = _HEADER_PROBES.get(section_type, ())
    stop_words = _STOP_WORDS.get(section_type)

    for probe in probes:
        header = probe.search(resume_text)
        if header is None:
            continue
        stop = stop_words.search(resume_text, header.end())
        end = stop.start() if stop else len(resume_text)
        return resume_text[header.start():end]

    logger.debug(f"No '{section_type}' header found, using full resume text")
    return resume_text


def has_section(resume_text: str, section_type: SectionType) -> bool:
    """True if any header probe for ``section_type`` matches."""
    return any(probe.search(resume_text) for probe in _HEADER_PROBES.get(section_type, ()))
