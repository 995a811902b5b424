"""
LlamaIndex provider.

``LLM_PROVIDER`` names any LlamaIndex LLM class by its fully-qualified path,
for example ``llama_index.llms.google_genai.GoogleGenAI`` (the default, Gemini)
or ``llama_index.llms.anthropic.Anthropic``. The class is imported lazily so
only the integration actually configured needs to be installed.
"""

import logging
from importlib import import_module
from typing import Any, Dict, Optional

from fastapi.concurrency import run_in_threadpool
from llama_index.core.base.llms.base import BaseLLM

from ..exceptions import ConfigurationError, ProviderError
from .base import Provider
from ...core import settings

logger = logging.getLogger(__name__)


def _get_real_provider(provider_name: str):
    if not isinstance(provider_name, str):
        raise ConfigurationError("provider_name must be a string denoting a fully-qualified Python class name")
    dotpos = provider_name.rfind(".")
    if dotpos < 0:
        raise ConfigurationError(f"provider_name {provider_name!r} not correctly formatted")
    modname, classname = provider_name[:dotpos], provider_name[dotpos + 1:]
    try:
        module = import_module(modname)
    except ImportError as e:
        raise ConfigurationError(f"LLM integration {modname!r} is not installed: {e}") from e
    try:
        return getattr(module, classname)
    except AttributeError as e:
        raise ConfigurationError(f"{modname!r} has no class {classname!r}") from e


class LlamaIndexProvider(Provider):
    def __init__(self,
                 api_key: Optional[str] = settings.LLM_API_KEY,
                 api_base_url: Optional[str] = settings.LLM_BASE_URL,
                 model_name: str = settings.LL_MODEL,
                 provider: str = settings.LLM_PROVIDER,
                 opts: Optional[Dict[str, Any]] = None):
        self.opts = opts or {}
        self._model = model_name
        if not provider:
            raise ConfigurationError("Provider string is required")
        provider_cls = _get_real_provider(provider)
        if not (isinstance(provider_cls, type) and issubclass(provider_cls, BaseLLM)):
            raise ConfigurationError(
                "LLM provider must be a llama_index.llms.* class - a subclass of "
                "llama_index.core.base.llms.base.BaseLLM"
            )

        kwargs_for_provider: Dict[str, Any] = {
            "model": model_name,
            "api_key": api_key,
        }
        if api_base_url:
            kwargs_for_provider["base_url"] = api_base_url
        if self.opts.get("temperature") is not None:
            kwargs_for_provider["temperature"] = self.opts["temperature"]
        if self.opts.get("max_tokens") is not None:
            kwargs_for_provider["max_tokens"] = self.opts["max_tokens"]
        try:
            self._client = provider_cls(**kwargs_for_provider)
        except Exception as e:
            raise ConfigurationError(f"Could not initialise {provider}: {e}") from e

    def _generate_sync(self, prompt: str) -> str:
        try:
            return self._client.complete(prompt).text
        except Exception as e:
            logger.error(f"llama_index sync error: {e}")
            raise ProviderError(f"llama_index - Error generating response: {e}") from e

    async def __call__(self, prompt: str, **generation_args: Any) -> str:
        if generation_args:
            logger.warning(f"LlamaIndexProvider ignoring generation_args: {generation_args}")
        return await run_in_threadpool(self._generate_sync, prompt)
