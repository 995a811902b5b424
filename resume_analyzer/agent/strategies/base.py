from abc import ABC, abstractmethod
from typing import Any, Dict

from ..providers.base import Provider


class Strategy(ABC):
    @abstractmethod
    async def __call__(self, prompt: str, provider: Provider, **generation_args: Any) -> Dict[str, Any]:
        """Run ``prompt`` through ``provider`` and return the parsed output."""
