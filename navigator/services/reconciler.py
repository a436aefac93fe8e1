# navigator/services/reconciler.py
# -----------------------------------------------------------------------------
# 대시보드 상태 컨테이너
# - current_result_set : 마지막으로 받은 분석 결과 (원본)
# - working_copy       : 사용자가 비용을 수정하는 사본
# - active_store_type  : 현재 선택된 탭
# 상태 변경은 아래 전이 메서드로만 일어난다.
# -----------------------------------------------------------------------------
from __future__ import annotations

import math
import re
from typing import Any, Dict, List, Optional

from loguru import logger
from pydantic.alias_generators import to_camel

from navigator.core.config import settings
from navigator.core.constants import StoreType
from navigator.core.errors import (
    AnalysisError,
    AnalysisInProgressError,
    InvalidCostFieldError,
    UnknownStoreTypeError,
)
from navigator.schemas.analysis import (
    EDITABLE_COST_FIELDS,
    AnalysisResult,
    FilterSelection,
)

_LEADING_INT = re.compile(r"^\s*([+-]?)(0[xX][0-9a-fA-F]+|\d+)")

# API 에서 camelCase 로 들어오는 항목명도 허용
_COST_FIELD_ALIASES = {to_camel(name): name for name in EDITABLE_COST_FIELDS}


def parse_cost_input(raw: Any) -> int:
    """
    입력창 값 해석 (parseInt 규칙: 앞쪽 10진 정수, 0x 접두사는 16진수).
    정수 부분을 읽을 수 없으면 0.
    """
    if isinstance(raw, bool) or raw is None:
        return 0
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if math.isfinite(raw) else 0
    m = _LEADING_INT.match(str(raw))
    if not m:
        return 0
    sign, digits = m.groups()
    value = int(digits, 16) if digits[:2] in ("0x", "0X") else int(digits)
    return -value if sign == "-" else value


def resolve_cost_field(field: str) -> str:
    name = _COST_FIELD_ALIASES.get(field, field)
    if name not in EDITABLE_COST_FIELDS:
        raise InvalidCostFieldError(field)
    return name


class DashboardState:
    def __init__(self, allow_concurrent: Optional[bool] = None):
        self.allow_concurrent = (
            settings.ALLOW_CONCURRENT_ANALYSIS
            if allow_concurrent is None
            else allow_concurrent
        )
        self._clear()

    def _clear(self) -> None:
        self.filters: Optional[FilterSelection] = None
        self.current_result_set: Optional[List[AnalysisResult]] = None
        self.working_copy: Optional[List[AnalysisResult]] = None
        self.active_store_type: Optional[StoreType] = None
        self.is_loading = False
        self.error: Optional[str] = None
        self._in_flight = 0
        # 마지막으로 도착한 (원본, 사본). 실패 시 복원 대상
        self._settled: tuple = (None, None)

    # ---- 전이 -----------------------------------------------------------------
    def begin_request(self, filters: FilterSelection) -> None:
        """요청 시작: 결과/사본/오류를 비우고 로딩 표시. 탭은 그대로."""
        if self.is_loading and not self.allow_concurrent:
            raise AnalysisInProgressError()
        self._in_flight += 1
        self.filters = filters
        self.current_result_set = None
        self.working_copy = None
        self.error = None
        self.is_loading = True

    def apply_results(self, results: List[AnalysisResult]) -> None:
        """새 결과 도착: 원본 교체, 사본 재생성, 탭 재조정."""
        self.current_result_set = list(results)
        self.working_copy = [r.model_copy(deep=True) for r in results]
        self._settled = (self.current_result_set, self.working_copy)
        self._finish_one()
        self.error = None

        if not self.working_copy:
            self.active_store_type = None
        elif self.active_store_type is None or not any(
            r.store_type == self.active_store_type for r in self.working_copy
        ):
            self.active_store_type = self.working_copy[0].store_type

    def fail(self, error: AnalysisError) -> None:
        """
        실패: 고정 메시지 기록, 로딩 해제.
        진행 중인 다른 요청이 없으면 마지막으로 도착한 결과/사본을 되돌린다.
        겹친 요청 중 먼저 끝난 쪽의 결과가 있으면 그 결과가 유지된다.
        """
        self._finish_one()
        self.error = error.message
        if self._in_flight == 0:
            self.current_result_set, self.working_copy = self._settled

    def _finish_one(self) -> None:
        self._in_flight = max(0, self._in_flight - 1)
        self.is_loading = self._in_flight > 0

    def select_tab(self, store_type: StoreType) -> None:
        if self._find(store_type) is None:
            raise UnknownStoreTypeError(store_type)
        self.active_store_type = store_type

    def edit_cost(self, field: str, raw_value: Any) -> None:
        """활성 탭의 비용 항목 하나를 바꾸고 두 합계를 다시 계산."""
        name = resolve_cost_field(field)
        if self.active_store_type is None:
            return
        index = self._find(self.active_store_type)
        if index is None:
            return
        target = self.working_copy[index]
        value = parse_cost_input(raw_value)
        target.costs = target.costs.with_value(name, value)
        logger.debug(
            f"[Dashboard] {target.store_type.value} {name}={value} "
            f"startup={target.costs.total_startup} monthly={target.costs.total_monthly}"
        )

    def reset(self) -> None:
        self._clear()

    # ---- 조회 -----------------------------------------------------------------
    def _find(self, store_type: StoreType) -> Optional[int]:
        # 같은 유형이 여럿이면 마지막 항목
        found = None
        for i, r in enumerate(self.working_copy or []):
            if r.store_type == store_type:
                found = i
        return found

    @property
    def active_result(self) -> Optional[AnalysisResult]:
        if self.active_store_type is None:
            return None
        index = self._find(self.active_store_type)
        return None if index is None else self.working_copy[index]

    @property
    def show_tabs(self) -> bool:
        # 결과가 하나뿐이면 탭을 그리지 않는다
        return len(self.working_copy or []) > 1

    def snapshot(self) -> Dict[str, Any]:
        return {
            "filters": self.filters,
            "working_copy": self.working_copy or [],
            "active_store_type": self.active_store_type,
            "active_result": self.active_result,
            "show_tabs": self.show_tabs,
            "is_loading": self.is_loading,
            "error": self.error,
        }
