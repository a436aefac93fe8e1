# navigator/services/gemini.py
# -----------------------------------------------------------------------------
# 텍스트 생성 포트와 어댑터
# - TextGenerator: generate(prompt, schema) -> 원문 텍스트
# - GeminiGenerator: google-genai SDK 비동기 호출 (JSON 구조화 출력)
# - StaticGenerator: 고정 응답 (테스트/오프라인 데모)
# -----------------------------------------------------------------------------
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Protocol

from google import genai
from google.genai import types
from loguru import logger

from navigator.core.config import settings
from navigator.core.errors import ConfigurationError


class TextGenerator(Protocol):
    async def generate(self, prompt: str, schema: Dict[str, Any]) -> str: ...


class GeminiGenerator:
    """Gemini generate_content 호출 어댑터. 재시도/캐시 없음."""

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        self.api_key = api_key or settings.GEMINI_API_KEY
        if not self.api_key:
            raise ConfigurationError("GEMINI_API_KEY가 설정되어 있지 않습니다.")
        self.model = model or settings.GEMINI_MODEL
        self.client = genai.Client(api_key=self.api_key)

    async def generate(self, prompt: str, schema: Dict[str, Any]) -> str:
        response = await self.client.aio.models.generate_content(
            model=self.model,
            contents=prompt,
            config=types.GenerateContentConfig(
                response_mime_type="application/json",
                response_schema=schema,
            ),
        )
        text = (response.text or "").strip()
        if not text:
            raise RuntimeError(f"[Gemini] empty response (model={self.model})")
        logger.info(f"[Gemini] model={self.model} chars={len(text)}")
        return text


class StaticGenerator:
    """항상 같은 텍스트를 돌려주는 생성기. calls 에 받은 프롬프트를 기록."""

    def __init__(self, text: str = "[]"):
        self.text = text
        self.calls: list[tuple[str, Dict[str, Any]]] = []

    @classmethod
    def from_file(cls, path: str | Path) -> "StaticGenerator":
        return cls(Path(path).read_text(encoding="utf-8"))

    async def generate(self, prompt: str, schema: Dict[str, Any]) -> str:
        self.calls.append((prompt, schema))
        return self.text


def build_generator() -> TextGenerator:
    """설정에 따라 생성기 선택. 고정 응답 파일이 있으면 그것을 우선."""
    if settings.NAVIGATOR_FAKE_RESPONSE_FILE:
        logger.warning(
            f"[Gemini] 고정 응답 사용: {settings.NAVIGATOR_FAKE_RESPONSE_FILE}"
        )
        return StaticGenerator.from_file(settings.NAVIGATOR_FAKE_RESPONSE_FILE)
    return GeminiGenerator()
