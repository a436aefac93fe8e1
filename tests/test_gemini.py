"""Tests for the Gemini adapter and generator selection."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from navigator.core.errors import ConfigurationError
from navigator.schemas.contract import RESPONSE_SCHEMA
from navigator.services import gemini
from navigator.services.gemini import GeminiGenerator, StaticGenerator, build_generator


@pytest.fixture
def mock_genai_client():
    with patch("navigator.services.gemini.genai.Client") as client_cls:
        client = MagicMock()
        client.aio.models.generate_content = AsyncMock(
            return_value=MagicMock(text='  [{"storeType": "일반점포"}]\n')
        )
        client_cls.return_value = client
        yield client_cls, client


class TestGeminiGenerator:
    def test_requires_api_key(self, monkeypatch):
        monkeypatch.setattr(gemini.settings, "GEMINI_API_KEY", None)
        with pytest.raises(ConfigurationError):
            GeminiGenerator()

    def test_uses_settings(self, monkeypatch, mock_genai_client):
        client_cls, _ = mock_genai_client
        monkeypatch.setattr(gemini.settings, "GEMINI_API_KEY", "test-key")
        monkeypatch.setattr(gemini.settings, "GEMINI_MODEL", "gemini-test")

        generator = GeminiGenerator()

        assert generator.model == "gemini-test"
        client_cls.assert_called_once_with(api_key="test-key")

    @pytest.mark.asyncio
    async def test_generate_requests_json(self, mock_genai_client):
        _, client = mock_genai_client
        generator = GeminiGenerator(api_key="k", model="gemini-2.5-flash")

        text = await generator.generate("prompt", RESPONSE_SCHEMA)

        assert text == '[{"storeType": "일반점포"}]'
        kwargs = client.aio.models.generate_content.call_args.kwargs
        assert kwargs["model"] == "gemini-2.5-flash"
        assert kwargs["contents"] == "prompt"
        assert kwargs["config"].response_mime_type == "application/json"

    @pytest.mark.asyncio
    async def test_empty_reply_is_error(self, mock_genai_client):
        _, client = mock_genai_client
        client.aio.models.generate_content.return_value = MagicMock(text=None)
        generator = GeminiGenerator(api_key="k")

        with pytest.raises(RuntimeError):
            await generator.generate("prompt", RESPONSE_SCHEMA)


class TestBuildGenerator:
    def test_fake_response_file(self, monkeypatch, tmp_path):
        path = tmp_path / "response.json"
        path.write_text('[{"storeType": "배달전문"}]', encoding="utf-8")
        monkeypatch.setattr(gemini.settings, "NAVIGATOR_FAKE_RESPONSE_FILE", str(path))

        generator = build_generator()

        assert isinstance(generator, StaticGenerator)
        assert "배달전문" in generator.text

    def test_gemini_by_default(self, monkeypatch, mock_genai_client):
        monkeypatch.setattr(gemini.settings, "NAVIGATOR_FAKE_RESPONSE_FILE", None)
        monkeypatch.setattr(gemini.settings, "GEMINI_API_KEY", "k")

        assert isinstance(build_generator(), GeminiGenerator)
