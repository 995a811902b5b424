import logging

from resume_analyzer.core.config import Settings, validate_settings


class TestSettings:
    def test_gemini_api_key_alias(self, monkeypatch):
        """GEMINI_API_KEY is accepted in place of LLM_API_KEY."""
        monkeypatch.delenv("LLM_API_KEY", raising=False)
        monkeypatch.setenv("GEMINI_API_KEY", "gemini-secret")

        config = Settings(_env_file=None)

        assert config.LLM_API_KEY == "gemini-secret"
        assert config.ai_enabled

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("LLM_API_KEY", raising=False)
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.delenv("LLM_PROVIDER", raising=False)

        config = Settings(_env_file=None)

        assert config.LLM_API_KEY is None
        assert config.LLM_PROVIDER == "llama_index.llms.google_genai.GoogleGenAI"
        assert config.MAX_FILE_SIZE == 5 * 1024 * 1024
        assert config.EXTRACTION_CACHE_SIZE == 50

    def test_ollama_needs_no_key(self, monkeypatch):
        monkeypatch.delenv("LLM_API_KEY", raising=False)
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        assert Settings(_env_file=None, LLM_PROVIDER="ollama").ai_enabled


class TestValidateSettings:
    def test_missing_key_is_a_warning(self, monkeypatch, caplog):
        monkeypatch.delenv("LLM_API_KEY", raising=False)
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.delenv("LLM_PROVIDER", raising=False)

        with caplog.at_level(logging.WARNING):
            warnings = validate_settings(Settings(_env_file=None))

        assert warnings == ["LLM_API_KEY not set - AI analysis will not be available"]
        assert "AI analysis will not be available" in caplog.text

    def test_configured_key(self):
        assert validate_settings(Settings(_env_file=None, LLM_API_KEY="secret")) == []
