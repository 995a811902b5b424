from typing import Optional


class ResumeValidationError(ValueError):
    """Raised when the resume text or job role of a request is missing or empty."""

    def __init__(self, message: str = "Resume text and job role are required"):
        super().__init__(message)


class ResumeParsingError(Exception):
    """Raised when text cannot be extracted from an uploaded resume file."""

    def __init__(self, filename: Optional[str] = None, message: Optional[str] = None):
        if message is None:
            message = f"Failed to extract text from {filename or 'uploaded file'}"
        super().__init__(message)
        self.filename = filename


class AIResponseValidationError(Exception):
    """Raised when the AI reply parses but does not follow the result contract."""

    def __init__(self, message: Optional[str] = None, original_error: Optional[str] = None):
        if message is None:
            message = "Invalid AI response structure"
        if original_error:
            message = f"{message}: {original_error}"
        super().__init__(message)
        self.original_error = original_error
