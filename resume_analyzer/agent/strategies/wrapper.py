import json
import logging
import re
from typing import Any, Dict

from ..exceptions import StrategyError
from ..providers.base import Provider
from .base import Strategy

logger = logging.getLogger(__name__)

_CODE_FENCE = re.compile(r"```(?:json)?\s*")


class JSONWrapper(Strategy):
    """Parse a provider reply as a single JSON object."""

    async def __call__(self, prompt: str, provider: Provider, **generation_args: Any) -> Dict[str, Any]:
        response = await provider(prompt, **generation_args)
        logger.debug(f"provider response: {response!r}")
        return self.parse(response)

    @staticmethod
    def parse(response: str) -> Dict[str, Any]:
        # Models often wrap the object in markdown fences or add chatter.
        text = _CODE_FENCE.sub("", response or "").strip()
        start = text.find("{")
        end = text.rfind("}")
        if start == -1 or end < start:
            logger.error(f"No JSON object in provider response: {text[:200]!r}")
            raise StrategyError("JSON parsing error: no JSON object in response")
        try:
            return json.loads(text[start:end + 1])
        except json.JSONDecodeError as e:
            logger.error(f"JSON parsing error: {e}")
            raise StrategyError(f"JSON parsing error: {e}") from e
