# navigator/schemas/contract.py
# -----------------------------------------------------------------------------
# Gemini 구조화 출력 스키마
# - 점포 유형별 분석 객체 1개씩을 담은 배열을 요구
# - 필드명/타입은 schemas.analysis.AnalysisResult 의 camelCase 별칭과 일치해야 함
# -----------------------------------------------------------------------------
from typing import Any, Dict

from navigator.core.constants import MONEY_UNIT, STORE_TYPES


def _string(description: str) -> Dict[str, Any]:
    return {"type": "STRING", "description": description}


def _number(description: str) -> Dict[str, Any]:
    return {"type": "NUMBER", "description": description}


def _integer(description: str) -> Dict[str, Any]:
    return {"type": "INTEGER", "description": description}


_STORE_TYPE_CHOICES = ", ".join(f"'{t.value}'" for t in STORE_TYPES)

COMPETITOR_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "brandName": _string("경쟁 프랜차이즈 브랜드명"),
        "count": _integer("해당 브랜드의 점포 수"),
        "estimatedMonthlySales": _integer(
            f"해당 브랜드의 점포당 월 평균 예상 매출 (단위: {MONEY_UNIT})"
        ),
    },
    "required": ["brandName", "count", "estimatedMonthlySales"],
}

COST_FIELDS = [
    ("franchiseFee", "가맹비"),
    ("deposit", "보증금"),
    ("interior", "인테리어 비용"),
    ("other", "기타 비용"),
    ("totalStartup", "총 창업 비용 합계"),
    ("rent", "월 임대료"),
    ("labor", "월 인건비"),
    ("utilities", "월 공과금 및 관리비"),
    ("totalMonthly", "총 월 고정비 합계"),
]

COSTS_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "description": f"예상 창업 및 운영 비용 (단위: {MONEY_UNIT})",
    "properties": {name: _integer(desc) for name, desc in COST_FIELDS},
    "required": [name for name, _ in COST_FIELDS],
}

SALES_POINT_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "period": _string("분석 기간 (예: 1일차, 1주차, 1월)"),
        "sales": _integer(f"해당 기간의 예상 매출 (단위: {MONEY_UNIT})"),
    },
    "required": ["period", "sales"],
}

ANALYSIS_RESULT_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "storeType": _string(
            f"분석 대상 점포 유형. {_STORE_TYPE_CHOICES} 중 하나여야 합니다."
        ),
        "summary": _string("선택된 조건에 대한 시장의 간략한 요약. 1-2문장."),
        "populationDensity": _string(
            "분석 지역의 인구 밀집도 특징을 10자 내외로 요약. (예: '1인 가구 밀집')"
        ),
        "floatingPopulation": _string(
            "분석 지역의 유동 인구 특징을 10자 내외로 요약. (예: '주중 주간에 집중')"
        ),
        "industryClosureRate": _number(
            "분석 지역 내 해당 업종의 연간 평균 폐업률(%). 0-100 사이의 숫자."
        ),
        "newBusinessSurvivalRate": _number(
            "해당 조건으로 신규 창업 시 1년 내 생존 확률(%). 0-100 사이의 숫자."
        ),
        "competitorDistribution": {
            "type": "ARRAY",
            "description": "입력된 상세 주소 근방의 동종업계 주요 프랜차이즈 브랜드와 그 수. 5개 예시.",
            "items": COMPETITOR_SCHEMA,
        },
        "successRate": _number("해당 조건에서의 예상 성공 확률 (0~100 사이의 숫자)"),
        "successContext": _string(
            "주변 동종업계 평균 성공률과 비교한 현재 조건의 성공률 수준. "
            "(예: '주변 평균 대비 15% 높습니다.')"
        ),
        "costs": COSTS_SCHEMA,
        "sales": {
            "type": "ARRAY",
            "description": "선택된 분석 주기에 따른 예상 매출 데이터. 12개 기간 데이터.",
            "items": SALES_POINT_SCHEMA,
        },
        "recommendation": _string(
            "모든 데이터를 종합하여 내리는 최종 투자 추천 및 조언. 3-4문장."
        ),
    },
    "required": [
        "storeType",
        "summary",
        "populationDensity",
        "floatingPopulation",
        "industryClosureRate",
        "newBusinessSurvivalRate",
        "competitorDistribution",
        "successRate",
        "successContext",
        "costs",
        "sales",
        "recommendation",
    ],
}

RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "ARRAY",
    "description": (
        "점포 유형별 분석 결과 배열. 사용자가 여러 점포 유형을 선택하면, "
        "각 유형에 대한 분석 객체가 이 배열에 포함됩니다."
    ),
    "items": ANALYSIS_RESULT_SCHEMA,
}
