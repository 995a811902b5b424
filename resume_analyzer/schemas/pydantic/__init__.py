from .resume_analysis import (
    AnalysisFailureModel,
    AnalysisStatsModel,
    AnalysisTextRequest,
    FeedbackModel,
    ResumeAnalysisModel,
)

__all__ = [
    "AnalysisFailureModel",
    "AnalysisStatsModel",
    "AnalysisTextRequest",
    "FeedbackModel",
    "ResumeAnalysisModel",
]
