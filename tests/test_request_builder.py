"""Tests for prompt construction and the single outbound call."""

import httpx
import pytest

from conftest import FailingGenerator
from navigator.core.constants import AnalysisPeriod, StoreType
from navigator.core.errors import ANALYSIS_FAILED_MESSAGE, AnalysisFetchError
from navigator.schemas.analysis import FilterSelection
from navigator.schemas.contract import RESPONSE_SCHEMA
from navigator.services.gemini import StaticGenerator
from navigator.services.request_builder import (
    build_and_send,
    build_prompt,
    resolve_store_types,
)


def _filters(store_types):
    return FilterSelection(
        region="부산시 해운대구 우동",
        industry="커피전문점",
        store_types=store_types,
        analysis_period=AnalysisPeriod.WEEKLY,
    )


class TestResolveStoreTypes:
    def test_empty_defaults_to_standard(self):
        assert resolve_store_types(_filters([])) == [StoreType.STANDARD]

    def test_order_kept_and_deduplicated(self):
        selected = [StoreType.TAKEOUT, StoreType.DELIVERY, StoreType.TAKEOUT]
        assert resolve_store_types(_filters(selected)) == [
            StoreType.TAKEOUT,
            StoreType.DELIVERY,
        ]

    def test_empty_request_equals_standard_request(self):
        assert build_prompt(_filters([])) == build_prompt(
            _filters([StoreType.STANDARD])
        )


class TestBuildPrompt:
    def test_embeds_all_filters(self):
        prompt = build_prompt(_filters([StoreType.DELIVERY, StoreType.STANDARD]))

        assert "부산시 해운대구 우동" in prompt
        assert "커피전문점" in prompt
        assert "배달전문, 일반점포" in prompt
        assert "주간" in prompt
        assert "storeType" in prompt
        assert "만원" in prompt


class TestBuildAndSend:
    @pytest.mark.asyncio
    async def test_single_call_with_schema(self):
        generator = StaticGenerator("[]")

        raw = await build_and_send(_filters([]), generator)

        assert raw == "[]"
        assert len(generator.calls) == 1
        prompt, schema = generator.calls[0]
        assert schema is RESPONSE_SCHEMA
        assert "일반점포" in prompt

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "exc",
        [
            httpx.ConnectError("connection refused to 10.0.0.1"),
            PermissionError("API key invalid: AIza-secret"),
            RuntimeError("[Gemini] empty response"),
        ],
    )
    async def test_errors_wrapped_without_leaking(self, exc):
        generator = FailingGenerator(exc)

        with pytest.raises(AnalysisFetchError) as info:
            await build_and_send(_filters([]), generator)

        assert generator.calls == 1
        assert info.value.message == ANALYSIS_FAILED_MESSAGE
        assert str(exc) not in info.value.message
        assert info.value.__cause__ is exc
