from .exceptions import ConfigurationError, ProviderError, StrategyError
from .manager import AgentManager

__all__ = ["AgentManager", "ConfigurationError", "ProviderError", "StrategyError"]
