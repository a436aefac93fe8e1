"""Shared fixtures: canned AI responses, stub generators, API client."""

import json
from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient

from navigator.core.constants import AnalysisPeriod, StoreType
from navigator.core.deps import get_generator, get_session_store
from navigator.main import app
from navigator.schemas.analysis import FilterSelection
from navigator.services.gemini import StaticGenerator
from navigator.services.session_store import SessionStore


def make_item(store_type: str, **overrides) -> Dict[str, Any]:
    item = {
        "storeType": store_type,
        "summary": "대학가 상권으로 젊은 유동인구가 많습니다.",
        "populationDensity": "1인 가구 밀집",
        "floatingPopulation": "주중 야간 집중",
        "industryClosureRate": 18.5,
        "newBusinessSurvivalRate": 64,
        "competitorDistribution": [
            {"brandName": "BBQ", "count": 4, "estimatedMonthlySales": 4200},
            {"brandName": "교촌", "count": 3, "estimatedMonthlySales": 5100},
        ],
        "successRate": 57,
        "successContext": "주변 평균 대비 5% 높습니다.",
        "costs": {
            "franchiseFee": 1000,
            "deposit": 3000,
            "interior": 4000,
            "other": 500,
            "totalStartup": 8500,
            "rent": 250,
            "labor": 600,
            "utilities": 80,
            "totalMonthly": 930,
        },
        "sales": [{"period": f"{m}월", "sales": 3000 + m * 10} for m in range(1, 13)],
        "recommendation": "배달 수요를 적극 공략하세요.",
    }
    item.update(overrides)
    return item


class FailingGenerator:
    def __init__(self, exc: Exception):
        self.exc = exc
        self.calls = 0

    async def generate(self, prompt, schema):
        self.calls += 1
        raise self.exc


@pytest.fixture
def two_type_response() -> str:
    return json.dumps(
        [make_item(StoreType.DELIVERY.value), make_item(StoreType.STANDARD.value)],
        ensure_ascii=False,
    )


@pytest.fixture
def filters() -> FilterSelection:
    return FilterSelection(
        region="서울시 동대문구 회기동",
        industry="치킨",
        store_types=[StoreType.DELIVERY, StoreType.STANDARD],
        analysis_period=AnalysisPeriod.MONTHLY,
    )


@pytest.fixture
def static_generator(two_type_response) -> StaticGenerator:
    return StaticGenerator(two_type_response)


@pytest.fixture
def client(static_generator):
    store = SessionStore()
    app.dependency_overrides[get_generator] = lambda: static_generator
    app.dependency_overrides[get_session_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
