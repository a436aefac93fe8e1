# navigator/services/request_builder.py
# -----------------------------------------------------------------------------
# 필터 -> 프롬프트 + 출력 스키마 -> AI 호출 1회
# - 점포 유형 미선택 시 일반점포로 분석
# - 호출 실패는 모두 AnalysisFetchError(고정 메시지)로 감싼다
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import List

from loguru import logger

from navigator.core.constants import MONEY_UNIT, StoreType
from navigator.core.errors import AnalysisFetchError
from navigator.schemas.analysis import FilterSelection
from navigator.schemas.contract import RESPONSE_SCHEMA
from navigator.services.gemini import TextGenerator


def resolve_store_types(filters: FilterSelection) -> List[StoreType]:
    """요청 대상 점포 유형 (순서 유지, 중복 제거). 비어 있으면 [일반점포]."""
    resolved: List[StoreType] = []
    for store_type in filters.store_types:
        if store_type not in resolved:
            resolved.append(store_type)
    return resolved or [StoreType.STANDARD]


def build_prompt(filters: FilterSelection) -> str:
    store_types = ", ".join(t.value for t in resolve_store_types(filters))
    region = filters.region
    industry = filters.industry
    period = filters.analysis_period.value

    return f"""
당신은 대한민국 프랜차이즈 시장 및 상권 전문 데이터 분석가입니다. 아래 조건에 맞춰 특정 지역 상권에 대한 매우 현실적이고 통찰력 있는 가상 분석 데이터를 생성해주세요.
모든 금액의 단위는 '{MONEY_UNIT}'입니다.

- 분석 상세 주소: {region}
- 프랜차이즈 업종: {industry}
- 점포 유형: {store_types}
- 매출 분석 주기: {period}

**요구사항:**
1. **중요:** 위에 명시된 각 '점포 유형'({store_types})에 대해 개별적인 분석 데이터를 생성하여 JSON 배열 형태로 반환해주세요. 각 배열 요소는 하나의 점포 유형에 대한 완전한 분석이어야 합니다.
2. 각 분석 객체에는 'storeType' 필드가 반드시 포함되어야 하며, 값은 분석 대상 점포 유형이어야 합니다.
3. **상권 요약:** '{region}' 주변의 상권 특징(유동인구, 주요 고객층, 임대료 수준 등)을 간략히 요약해주세요.
4. **상권 환경 분석:**
   * **인구 밀집도:** 지역의 인구 밀집도와 주요 구성원 특징을 설명해주세요.
   * **유동 인구:** 주중/주말, 주간/야간 별 유동인구 특징을 설명해주세요.
   * **업종 폐업률:** 해당 지역의 '{industry}' 업종 연간 평균 폐업률을 추정해주세요.
   * **신규 업체 생존율:** 위의 모든 조건을 고려했을 때, 신규 업체가 1년 안에 생존할 확률을 추정해주세요.
5. **경쟁사 분석:** 해당 주소 근방의 동일 업종({industry}) 프랜차이즈 브랜드 분포를 분석해주세요. 각 브랜드별 **점포 수**와 **점포당 월 평균 예상 매출**을 포함해야 합니다.
6. **성공률 분석:** 제시된 조건에서의 창업 성공률을 예측하고, 주변 동종업계 평균 성공률과 비교하여 맥락을 설명해주세요.
7. **비용 분석:** 초기 창업 비용과 월 고정 비용을 현실적으로 추정해주세요.
8. **매출 분석:** 선택된 주기({period})에 맞춰 12개 기간의 예상 매출을 생성해주세요.
9. **최종 조언:** 모든 데이터를 종합하여 최종 투자 추천 및 조언을 제공해주세요.

결과는 반드시 제공된 JSON 스키마(객체 배열)에 맞춰서 생성해주세요.
""".strip()


async def build_and_send(filters: FilterSelection, generator: TextGenerator) -> str:
    """
    프롬프트/스키마를 만들어 생성기를 정확히 한 번 호출하고 원문 텍스트를 반환.
    어떤 예외든 원문은 로그에만 남기고 AnalysisFetchError 로 바꿔 던진다.
    """
    prompt = build_prompt(filters)
    try:
        return await generator.generate(prompt, RESPONSE_SCHEMA)
    except Exception as e:
        logger.error(f"[Analysis] AI 호출 실패: {type(e).__name__}: {e}")
        raise AnalysisFetchError(detail=f"{type(e).__name__}: {e}") from e
