from dataclasses import dataclass, field
from typing import List, Sequence

MAX_LISTED_KEYWORDS = 8
BRIEF_RESUME_LENGTH = 500

RECOMMENDATIONS = (
    "Use specific examples that demonstrate your expertise with mentioned technologies",
    "Include relevant certifications or training programs",
    "Quantify your achievements with numbers, percentages, or metrics",
    "Tailor your resume for each specific job application",
    "Consider adding a professional summary that highlights your key qualifications",
)


@dataclass
class Feedback:
    overall: str = ""
    strengths: List[str] = field(default_factory=list)
    improvements: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)


def overall_assessment(score: int, job_role: str) -> str:
    if score >= 80:
        return (
            f"Excellent match! Your resume shows strong alignment with {job_role} "
            f"requirements with {score}% relevance."
        )
    if score >= 60:
        return (
            f"Good match! Your resume demonstrates relevant skills for {job_role} "
            f"with {score}% relevance, but there's room for improvement."
        )
    if score >= 40:
        return (
            f"Moderate match. Your resume shows some relevant skills for {job_role} "
            f"({score}% relevance), but significant improvements are needed."
        )
    return (
        f"Low match. Your resume currently has limited alignment with {job_role} "
        f"requirements ({score}% relevance). Consider significant revisions."
    )


def generate_feedback(
    score: int,
    matched_keywords: Sequence[str],
    missing_keywords: Sequence[str],
    resume_text: str,
    job_role: str,
) -> Feedback:
    """Build the human-readable assessment for a keyword analysis."""
    text = resume_text.lower()
    feedback = Feedback(overall=overall_assessment(score, job_role))

    if matched_keywords:
        listed = ", ".join(matched_keywords[:MAX_LISTED_KEYWORDS])
        feedback.strengths.append(f"Strong presence of key skills: {listed}")
    if "experience" in text and "year" in text:
        feedback.strengths.append("Resume includes relevant work experience")
    if "project" in text:
        feedback.strengths.append("Demonstrates practical experience through projects")

    if missing_keywords:
        listed = ", ".join(missing_keywords[:MAX_LISTED_KEYWORDS])
        feedback.improvements.append(f"Consider adding these important {job_role} keywords: {listed}")
    if "quantif" not in text and "achiev" not in text:
        feedback.improvements.append("Add quantifiable achievements and impact metrics")
    if len(resume_text) < BRIEF_RESUME_LENGTH:
        feedback.improvements.append(
            "Resume appears brief - consider adding more detailed experience descriptions"
        )

    feedback.recommendations = list(RECOMMENDATIONS)
    return feedback
