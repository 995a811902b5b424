import logging
from typing import Any, Dict, Optional

from ..core import settings
from .exceptions import ConfigurationError
from .providers.base import Provider
from .strategies.wrapper import JSONWrapper

logger = logging.getLogger(__name__)


class AgentManager:
    """Sends a prompt to the configured LLM and returns its parsed JSON reply."""

    def __init__(self,
                 model: str = settings.LL_MODEL,
                 model_provider: str = settings.LLM_PROVIDER,
                 api_key: Optional[str] = settings.LLM_API_KEY,
                 ) -> None:
        self.strategy = JSONWrapper()
        self.model = model
        self.model_provider = model_provider
        self.api_key = api_key

    async def _get_provider(self, **kwargs: Any) -> Provider:
        # Default options for any LLM. Not all can handle them
        # but each provider can make best effort.
        opts = {
            "temperature": settings.LLM_TEMPERATURE,
            "max_tokens": settings.LLM_MAX_TOKENS,
        }
        opts.update(kwargs)
        match self.model_provider:
            case "ollama":
                from .providers.ollama import OllamaProvider
                return OllamaProvider(model_name=opts.get("model", self.model),
                                      opts=opts)
            case _:
                api_key = opts.get("llm_api_key", self.api_key)
                if not api_key:
                    raise ConfigurationError(
                        "LLM API key not configured. Please set LLM_API_KEY "
                        "(or GEMINI_API_KEY) in environment variables."
                    )
                from .providers.llama_index import LlamaIndexProvider
                return LlamaIndexProvider(api_key=api_key,
                                          model_name=self.model,
                                          api_base_url=opts.get("llm_base_url", settings.LLM_BASE_URL),
                                          provider=self.model_provider,
                                          opts=opts)

    async def run(self, prompt: str, **kwargs: Any) -> Dict[str, Any]:
        """
        Run the agent with the given prompt and generation arguments.
        """
        provider = await self._get_provider(**kwargs)
        logger.info(f"Running {self.model_provider} ({self.model})")
        return await self.strategy(prompt, provider)
