import logging
from dataclasses import asdict
from typing import Union

from ..schemas.pydantic.resume_analysis import (
    MAX_MISSING_KEYWORDS,
    AnalysisFailureModel,
    AnalysisStatsModel,
    FeedbackModel,
    ResumeAnalysisModel,
)
from .calculator import calculate_score, round_half_up
from .catalog import get_keywords_for_role
from .feedback import generate_feedback

logger = logging.getLogger(__name__)


def analyze_resume_with_keywords(
    resume_text: str,
    job_role: str,
    strict_sections: bool = False,
) -> Union[ResumeAnalysisModel, AnalysisFailureModel]:
    """
    Deterministic keyword analysis of ``resume_text`` for ``job_role``.

    Unknown roles are not an error: they have no keywords and score 0. Any
    unexpected exception is reported as an ``AnalysisFailureModel`` rather
    than raised.
    """
    try:
        role_keywords = get_keywords_for_role(job_role)
        breakdown = calculate_score(resume_text, role_keywords, strict_sections=strict_sections)

        matched = [*breakdown.matched_technical, *breakdown.matched_soft]
        missing = [*breakdown.missing_technical, *breakdown.missing_soft][:MAX_MISSING_KEYWORDS]
        feedback = generate_feedback(breakdown.final_score, matched, missing, resume_text, job_role)

        return ResumeAnalysisModel(
            score=breakdown.final_score,
            matched_keywords=matched,
            missing_keywords=missing,
            feedback=FeedbackModel(**asdict(feedback)),
            analysis=AnalysisStatsModel(
                total_keywords=breakdown.total_keywords,
                matched_count=breakdown.matched_count,
                technical_matched=len(breakdown.matched_technical),
                soft_matched=len(breakdown.matched_soft),
                technical_total=len(role_keywords.technical),
                soft_total=len(role_keywords.soft),
                technical_score=round_half_up(breakdown.technical_score),
                soft_score=round_half_up(breakdown.soft_score),
                match_percentage=breakdown.match_percentage,
                context_bonus=breakdown.context_bonus,
            ),
        )
    except Exception as e:
        logger.exception(f"Keyword analysis failed: {e}")
        return AnalysisFailureModel(error=f"Failed to analyze resume: {e}")
