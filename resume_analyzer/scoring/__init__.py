"""Deterministic, rule-based resume keyword scoring."""

from .analyzer import analyze_resume_with_keywords
from .calculator import ScoreBreakdown, calculate_score
from .catalog import (
    RoleKeywordSet,
    get_all_keywords_for_role,
    get_keywords_for_role,
    list_roles,
)
from .feedback import Feedback, generate_feedback
from .matcher import MatchResult, match_keywords
from .normalizer import contains_keyword, variants_of
from .sections import extract_section

__all__ = [
    "Feedback",
    "MatchResult",
    "RoleKeywordSet",
    "ScoreBreakdown",
    "analyze_resume_with_keywords",
    "calculate_score",
    "contains_keyword",
    "extract_section",
    "generate_feedback",
    "get_all_keywords_for_role",
    "get_keywords_for_role",
    "list_roles",
    "match_keywords",
    "variants_of",
]
