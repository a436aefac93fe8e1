# navigator/services/normalizer.py
# -----------------------------------------------------------------------------
# AI 응답 텍스트 -> List[AnalysisResult]
# - JSON 파싱/배열 여부/필수 필드(storeType, costs) 검사
# - successRate, newBusinessSurvivalRate 는 0~100 으로 강제 (원본 값 불신)
# - 비용 합계(totalStartup/totalMonthly)는 받은 값 그대로 사용
# -----------------------------------------------------------------------------
from __future__ import annotations

import json
import math
from typing import Any, Iterable, List, Optional

from loguru import logger
from pydantic import ValidationError

from navigator.core.constants import StoreType
from navigator.core.errors import MalformedResponseError
from navigator.schemas.analysis import AnalysisResult

CLAMPED_FIELDS = ("successRate", "newBusinessSurvivalRate")
REQUIRED_FIELDS = ("storeType", "costs")


def clamp_rate(value: Any) -> float:
    """
    max(0, min(100, value || 0)).
    None/NaN/bool/숫자가 아닌 값은 0, 숫자 문자열은 숫자로 해석.
    """
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return 0
    if isinstance(value, int):
        # 10**400 같은 큰 정수는 float 변환 없이 비교
        return max(0, min(100, value))
    if not isinstance(value, float) or math.isnan(value):
        return 0
    return max(0, min(100, value))


def _strip_code_fence(text: str) -> str:
    text = text.strip()
    if text.startswith("```json"):
        text = text[7:]
    elif text.startswith("```"):
        text = text[3:]
    if text.endswith("```"):
        text = text[:-3]
    return text.strip()


def _normalize_item(index: int, item: Any, allowed: Optional[set]) -> AnalysisResult:
    if not isinstance(item, dict):
        raise MalformedResponseError(f"item[{index}] is not an object")
    for key in REQUIRED_FIELDS:
        if item.get(key) is None:
            raise MalformedResponseError(f"item[{index}] missing '{key}'")
    if not isinstance(item["costs"], dict):
        raise MalformedResponseError(f"item[{index}].costs is not an object")

    # 표시용 필드의 null 은 기본값으로
    cleaned = {k: v for k, v in item.items() if v is not None}
    for key in CLAMPED_FIELDS:
        cleaned[key] = clamp_rate(item.get(key))
    cleaned["costs"] = {k: v for k, v in item["costs"].items() if v is not None}

    try:
        result = AnalysisResult.model_validate(cleaned)
    except ValidationError as e:
        raise MalformedResponseError(f"item[{index}] invalid: {e}") from e

    if allowed is not None and result.store_type not in allowed:
        raise MalformedResponseError(
            f"item[{index}] storeType '{result.store_type.value}' was not requested"
        )
    return result


def parse_and_normalize(
    raw_text: str, expected_store_types: Optional[Iterable[StoreType]] = None
) -> List[AnalysisResult]:
    """
    응답 원문을 검증/정규화한 결과 배열로 변환.
    같은 storeType 이 두 번 나오면 MalformedResponseError.
    """
    try:
        data = json.loads(_strip_code_fence(raw_text or ""))
    except (ValueError, RecursionError) as e:
        # JSONDecodeError, 4300자리 초과 정수, 과도한 중첩
        logger.warning(f"[Analysis] JSON 파싱 실패: {e}")
        raise MalformedResponseError(f"invalid JSON: {type(e).__name__}: {e}") from e

    if not isinstance(data, list):
        raise MalformedResponseError(
            f"top-level value is {type(data).__name__}, expected array"
        )

    allowed = set(expected_store_types) if expected_store_types is not None else None
    results: List[AnalysisResult] = []
    seen: set = set()
    for index, item in enumerate(data):
        result = _normalize_item(index, item, allowed)
        if result.store_type in seen:
            raise MalformedResponseError(
                f"duplicate storeType '{result.store_type.value}'"
            )
        seen.add(result.store_type)
        results.append(result)

    logger.info(
        f"[Analysis] 결과 {len(results)}건: "
        + ", ".join(r.store_type.value for r in results)
    )
    return results
