from .analysis_service import AnalysisService
from .text_extraction import ExtractionCache, TextExtractor
from .exceptions import (
    AIResponseValidationError,
    ResumeParsingError,
    ResumeValidationError,
)

__all__ = [
    "AnalysisService",
    "ExtractionCache",
    "TextExtractor",
    "AIResponseValidationError",
    "ResumeParsingError",
    "ResumeValidationError",
]
