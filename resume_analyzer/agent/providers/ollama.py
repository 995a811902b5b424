import logging
from typing import Any, Dict, Optional

import ollama
from fastapi.concurrency import run_in_threadpool
from ollama import ResponseError as OllamaResponseError

from ..exceptions import ProviderError
from .base import Provider
from ...core import settings

logger = logging.getLogger(__name__)


class OllamaProvider(Provider):
    """Ollama LLM provider for text generation."""

    def __init__(
        self,
        model_name: str = settings.LL_MODEL,
        api_base_url: Optional[str] = settings.LLM_BASE_URL,
        opts: Optional[Dict[str, Any]] = None,
    ):
        self.opts = opts or {}
        self.model = model_name
        self._client = ollama.Client(host=api_base_url) if api_base_url else ollama.Client()

    def _generate_sync(self, prompt: str, options: Dict[str, Any]) -> str:
        try:
            response = self._client.generate(
                prompt=prompt,
                model=self.model,
                options=options,
                format="json",
            )
            return response["response"].strip()
        except OllamaResponseError as e:
            logger.error(f"Ollama generation error: status={e.status_code}, message={e}")
            raise ProviderError(f"Ollama - Error generating response: {e}") from e
        except Exception as e:
            logger.error(f"Ollama sync error: {e}")
            raise ProviderError(f"Ollama - Error generating response: {e}") from e

    async def __call__(self, prompt: str, **generation_args: Any) -> str:
        if generation_args:
            logger.warning(f"OllamaProvider ignoring generation_args {generation_args}")
        options = {
            "temperature": self.opts.get("temperature"),
            "num_predict": self.opts.get("max_tokens"),
        }
        return await run_in_threadpool(
            self._generate_sync, prompt, {k: v for k, v in options.items() if v is not None}
        )
