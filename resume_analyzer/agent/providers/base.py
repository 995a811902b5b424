from abc import ABC, abstractmethod
from typing import Any


class Provider(ABC):
    """Text-generation backend used by the agent."""

    @abstractmethod
    async def __call__(self, prompt: str, **generation_args: Any) -> str: ...
