from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

MAX_MISSING_KEYWORDS = 15


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class FeedbackModel(_CamelModel):
    overall: str
    strengths: List[str] = Field(default_factory=list)
    improvements: List[str] = Field(default_factory=list)
    recommendations: List[str] = Field(default_factory=list)


class AnalysisStatsModel(_CamelModel):
    total_keywords: int = Field(ge=0)
    matched_count: int = Field(ge=0)
    technical_matched: int = Field(ge=0)
    soft_matched: int = Field(ge=0)
    technical_total: int = Field(ge=0)
    soft_total: int = Field(ge=0)
    technical_score: int = Field(ge=0, le=100)
    soft_score: int = Field(ge=0, le=100)
    match_percentage: int = Field(ge=0, le=100)
    context_bonus: float = Field(ge=0, le=25)


class ResumeAnalysisModel(_CamelModel):
    success: Literal[True] = True
    score: int = Field(ge=0, le=100)
    matched_keywords: List[str]
    missing_keywords: List[str] = Field(max_length=MAX_MISSING_KEYWORDS)
    feedback: FeedbackModel
    analysis: AnalysisStatsModel
    analysis_method: Optional[Literal["AI", "Keywords"]] = None
    ai_powered: Optional[bool] = None
    fallback_reason: Optional[str] = None


class AnalysisFailureModel(_CamelModel):
    success: Literal[False] = False
    error: str
    analysis_method: Optional[Literal["Failed"]] = None
    ai_powered: Optional[bool] = None


class AnalysisTextRequest(_CamelModel):
    # empty values are rejected by the service with a 400, not by schema validation
    resume_text: str = ""
    job_role: str = ""
