"""
Tests for AgentManager and the LLM providers.

These tests verify:
1. A missing credential raises ConfigurationError before any provider is built
2. The Ollama provider wraps client failures as ProviderError
3. LlamaIndex provider resolution rejects bad class paths
"""

import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from resume_analyzer.agent.exceptions import ConfigurationError, ProviderError
from resume_analyzer.agent.manager import AgentManager


class TestAgentManager:
    """Tests for provider selection and run()."""

    @pytest.mark.asyncio
    async def test_missing_api_key_raises_configuration_error(self):
        """Hosted providers need an API key."""
        manager = AgentManager(model_provider="llama_index.llms.google_genai.GoogleGenAI", api_key=None)

        with pytest.raises(ConfigurationError, match="API key not configured"):
            await manager.run("prompt")

    def test_configuration_error_is_a_provider_error(self):
        """Callers can handle configuration problems as provider failures."""
        assert issubclass(ConfigurationError, ProviderError)

    @pytest.mark.asyncio
    async def test_run_parses_provider_reply(self):
        """run() returns the provider reply parsed as JSON."""
        manager = AgentManager(api_key="test-key")
        provider = AsyncMock(return_value='```json\n{"success": true, "score": 81}\n```')
        manager._get_provider = AsyncMock(return_value=provider)

        result = await manager.run("prompt")

        assert result == {"success": True, "score": 81}
        provider.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_ollama_needs_no_api_key(self):
        """The ollama provider is built without a credential."""
        with patch("resume_analyzer.agent.providers.ollama.ollama.Client") as client_cls:
            manager = AgentManager(model="llama3", model_provider="ollama", api_key=None)
            provider = await manager._get_provider()

        from resume_analyzer.agent.providers.ollama import OllamaProvider
        assert isinstance(provider, OllamaProvider)
        assert provider.model == "llama3"
        client_cls.assert_called_once()


class TestOllamaProvider:
    """Tests for OllamaProvider generation."""

    @pytest.fixture
    def provider_with_mock_client(self):
        """Create an OllamaProvider with a mocked client."""
        client = MagicMock()
        with patch("resume_analyzer.agent.providers.ollama.ollama.Client", return_value=client):
            from resume_analyzer.agent.providers.ollama import OllamaProvider
            provider = OllamaProvider(model_name="llama3", opts={"temperature": 0.1})
        return provider, client

    @pytest.mark.asyncio
    async def test_generate_returns_stripped_response(self, provider_with_mock_client):
        """The response text is returned without surrounding whitespace."""
        provider, client = provider_with_mock_client
        client.generate.return_value = {"response": '  {"success": true}\n'}

        result = await provider("prompt")

        assert result == '{"success": true}'
        kwargs = client.generate.call_args.kwargs
        assert kwargs["model"] == "llama3"
        assert kwargs["options"] == {"temperature": 0.1}

    @pytest.mark.asyncio
    async def test_generate_failure_raises_provider_error(self, provider_with_mock_client):
        """Client errors surface as ProviderError."""
        provider, client = provider_with_mock_client
        client.generate.side_effect = ConnectionError("connection refused")

        with pytest.raises(ProviderError, match="connection refused"):
            await provider("prompt")


class TestLlamaIndexProviderResolution:
    """Tests for resolving LLM_PROVIDER class paths."""

    def test_unformatted_name(self):
        from resume_analyzer.agent.providers.llama_index import _get_real_provider

        with pytest.raises(ConfigurationError, match="not correctly formatted"):
            _get_real_provider("GoogleGenAI")

    def test_missing_integration(self):
        from resume_analyzer.agent.providers.llama_index import _get_real_provider

        with pytest.raises(ConfigurationError, match="not installed"):
            _get_real_provider("llama_index.llms.does_not_exist.Nothing")

    def test_non_llm_class_is_rejected(self):
        from resume_analyzer.agent.providers.llama_index import LlamaIndexProvider

        with pytest.raises(ConfigurationError, match="BaseLLM"):
            LlamaIndexProvider(api_key="k", provider="collections.OrderedDict")
