class ProviderError(RuntimeError):
    """Raised when the underlying LLM provider fails"""


class ConfigurationError(ProviderError):
    """Raised when an LLM provider cannot be built from the current settings.

    Typically a missing credential. Callers treat it like any other provider
    failure and fall back to keyword analysis.
    """


class StrategyError(RuntimeError):
    """Raised when a Strategy cannot parse/return expected output"""
