# navigator/services/analyzer.py
# -----------------------------------------------------------------------------
# 분석 실행: 요청 시작 -> AI 호출 -> 응답 정규화 -> 상태 반영
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import List

from loguru import logger

from navigator.core.errors import AnalysisError, MalformedResponseError
from navigator.schemas.analysis import AnalysisResult, FilterSelection
from navigator.services.gemini import TextGenerator
from navigator.services.normalizer import parse_and_normalize
from navigator.services.reconciler import DashboardState
from navigator.services.request_builder import build_and_send, resolve_store_types


async def run_analysis(
    state: DashboardState, filters: FilterSelection, generator: TextGenerator
) -> List[AnalysisResult]:
    """
    한 번의 분석 요청을 끝까지 수행.
    실패 시 state.fail 후 AnalysisError 를 전파한다. 그 밖의 예외는 MalformedResponseError 로 바꾼다.
    """
    state.begin_request(filters)
    store_types = resolve_store_types(filters)
    logger.info(
        f"[Analysis] 요청: region={filters.region} industry={filters.industry} "
        f"store_types={[t.value for t in store_types]} "
        f"period={filters.analysis_period.value}"
    )
    try:
        raw = await build_and_send(filters, generator)
        results = parse_and_normalize(raw, expected_store_types=store_types)
    except AnalysisError as e:
        logger.error(f"[Analysis] 실패 code={e.code} detail={e.detail}")
        state.fail(e)
        raise
    except Exception as e:
        error = MalformedResponseError(f"{type(e).__name__}: {e}")
        logger.exception(f"[Analysis] 응답 처리 중 예외: {type(e).__name__}")
        state.fail(error)
        raise error from e

    state.apply_results(results)
    return results
