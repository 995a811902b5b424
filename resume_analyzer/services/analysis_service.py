import asyncio
import logging
import math
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from ..agent import AgentManager
from ..core import settings
from ..prompt import build_prompt
from ..schemas.pydantic.resume_analysis import (
    MAX_MISSING_KEYWORDS,
    AnalysisFailureModel,
    ResumeAnalysisModel,
)
from ..scoring import analyze_resume_with_keywords, get_keywords_for_role
from ..scoring.calculator import round_half_up
from .exceptions import AIResponseValidationError, ResumeValidationError

logger = logging.getLogger(__name__)

AnalysisOutcome = Union[ResumeAnalysisModel, AnalysisFailureModel]

# Set by this service, never taken from the model reply.
_TAG_FIELDS = ("analysisMethod", "analysis_method", "aiPowered", "ai_powered", "fallbackReason", "fallback_reason")


class AnalysisService:
    """
    Analyzes resumes with the LLM first and keyword scoring as the fallback.

    Every call returns a result: an AI result, a keyword result tagged with
    the reason the AI path failed, or an ``AnalysisFailureModel`` if both
    paths fail. The AI call is never retried.
    """

    def __init__(self,
                 agent_manager: Optional[AgentManager] = None,
                 timeout: float = settings.LLM_TIMEOUT_SECONDS) -> None:
        self.agent_manager = agent_manager if agent_manager is not None else AgentManager()
        self.timeout = timeout

    async def analyze_resume_with_ai(self, resume_text: str, job_role: str) -> AnalysisOutcome:
        if not resume_text or not resume_text.strip() or not job_role or not job_role.strip():
            raise ResumeValidationError()

        try:
            result = await self._analyze_with_llm(resume_text, job_role)
            logger.info(f"AI analysis completed for role '{job_role}' with score {result.score}")
            return result.model_copy(update={"analysis_method": "AI", "ai_powered": True})
        except Exception as ai_error:
            reason = str(ai_error) or type(ai_error).__name__
            logger.warning(f"AI analysis failed, falling back to keyword analysis: {reason}")

        result = analyze_resume_with_keywords(resume_text, job_role)
        if isinstance(result, AnalysisFailureModel):
            logger.error(f"Both AI and keyword analysis failed: {result.error}")
            return result.model_copy(update={"analysis_method": "Failed", "ai_powered": False})
        return result.model_copy(
            update={"analysis_method": "Keywords", "ai_powered": False, "fallback_reason": reason}
        )

    async def _analyze_with_llm(self, resume_text: str, job_role: str) -> ResumeAnalysisModel:
        role_keywords = get_keywords_for_role(job_role)
        prompt = build_prompt(
            resume_text,
            job_role,
            list(role_keywords.technical),
            list(role_keywords.soft),
        )
        raw = await asyncio.wait_for(self.agent_manager.run(prompt), timeout=self.timeout)
        return self.validate_ai_result(raw)

    @staticmethod
    def validate_ai_result(raw: Dict[str, Any]) -> ResumeAnalysisModel:
        """
        Accept an AI reply only if it declares success and carries a numeric
        score. The score is clamped to [0, 100] whatever the model returned.
        """
        if not isinstance(raw, dict) or not raw.get("success"):
            raise AIResponseValidationError()
        score = raw.get("score")
        if isinstance(score, bool) or not isinstance(score, (int, float)) or not math.isfinite(score):
            raise AIResponseValidationError(original_error=f"score {score!r} is not a number")

        payload = {key: value for key, value in raw.items() if key not in _TAG_FIELDS}
        payload["success"] = True
        payload["score"] = round_half_up(max(0, min(100, score)))
        missing = payload.get("missingKeywords")
        if isinstance(missing, list):
            payload["missingKeywords"] = missing[:MAX_MISSING_KEYWORDS]

        try:
            return ResumeAnalysisModel.model_validate(payload)
        except ValidationError as e:
            raise AIResponseValidationError(original_error=str(e)) from e
