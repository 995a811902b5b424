"""
Weighted keyword scoring.

Technical keywords carry 80% of the base score and soft skills 20%. Matched
technical keywords that also show up inside a recognised section earn a
context bonus (experience +3, projects +2, skills +1.5); matched soft skills
earn +1 when they appear in the experience section. The bonus is capped at 25
and the final score at 100.
"""

import math
from dataclasses import dataclass
from typing import Tuple

from .catalog import RoleKeywordSet
from .matcher import match_keywords
from .sections import extract_section, has_section

TECHNICAL_WEIGHT = 0.8
SOFT_WEIGHT = 0.2
MAX_CONTEXT_BONUS = 25
MAX_SCORE = 100

EXPERIENCE_BONUS = 3
PROJECTS_BONUS = 2
SKILLS_BONUS = 1.5
SOFT_EXPERIENCE_BONUS = 1


@dataclass(frozen=True)
class ScoreBreakdown:
    technical_score: float
    soft_score: float
    base_score: int
    context_bonus: float
    final_score: int
    matched_technical: Tuple[str, ...]
    matched_soft: Tuple[str, ...]
    missing_technical: Tuple[str, ...]
    missing_soft: Tuple[str, ...]

    @property
    def total_keywords(self) -> int:
        return (
            len(self.matched_technical) + len(self.missing_technical)
            + len(self.matched_soft) + len(self.missing_soft)
        )

    @property
    def matched_count(self) -> int:
        return len(self.matched_technical) + len(self.matched_soft)

    @property
    def match_percentage(self) -> int:
        if not self.total_keywords:
            return 0
        return round_half_up(100 * self.matched_count / self.total_keywords)


def round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; scores round .5 upwards.
    return int(math.floor(value + 0.5))


def _percentage(matched: int, total: int) -> float:
    return 100 * matched / total if total else 0.0


def _section(resume_text: str, section_type: str, strict: bool) -> str:
    if strict and not has_section(resume_text, section_type):
        return ""
    return extract_section(resume_text, section_type).lower()


def calculate_score(
    resume_text: str,
    role_keywords: RoleKeywordSet,
    strict_sections: bool = False,
) -> ScoreBreakdown:
    """
    Score ``resume_text`` against ``role_keywords``.

    With ``strict_sections`` a section whose header is missing contributes no
    context bonus instead of falling back to the whole resume.
    """
    technical = match_keywords(resume_text, role_keywords.technical)
    soft = match_keywords(resume_text, role_keywords.soft)

    technical_score = _percentage(len(technical.matched), len(role_keywords.technical))
    soft_score = _percentage(len(soft.matched), len(role_keywords.soft))
    base_score = round_half_up(technical_score * TECHNICAL_WEIGHT + soft_score * SOFT_WEIGHT)

    experience = _section(resume_text, "experience", strict_sections)
    skills = _section(resume_text, "skills", strict_sections)
    projects = _section(resume_text, "projects", strict_sections)

    context_bonus = 0.0
    for keyword in technical.matched:
        keyword_lower = keyword.lower()
        if keyword_lower in experience:
            context_bonus += EXPERIENCE_BONUS
        if keyword_lower in projects:
            context_bonus += PROJECTS_BONUS
        if keyword_lower in skills:
            context_bonus += SKILLS_BONUS
    for keyword in soft.matched:
        if keyword.lower() in experience:
            context_bonus += SOFT_EXPERIENCE_BONUS

    capped_bonus = min(context_bonus, MAX_CONTEXT_BONUS)
    final_score = round_half_up(min(MAX_SCORE, base_score + capped_bonus))

    return ScoreBreakdown(
        technical_score=technical_score,
        soft_score=soft_score,
        base_score=base_score,
        context_bonus=capped_bonus,
        final_score=final_score,
        matched_technical=technical.matched,
        matched_soft=soft.matched,
        missing_technical=technical.missing,
        missing_soft=soft.missing,
    )
