# navigator/schemas/dashboard.py
# -----------------------------------------------------------------------------
# 대시보드 API 요청/응답 스키마
# -----------------------------------------------------------------------------
from typing import List, Optional, Union

from navigator.core.constants import AnalysisPeriod, StoreType
from navigator.schemas.analysis import AnalysisResult, CamelModel, FilterSelection


class TabSelectRequest(CamelModel):
    store_type: StoreType


class CostEditRequest(CamelModel):
    field: str  # franchiseFee, deposit, interior, other, rent, labor, utilities
    value: Union[int, float, str, None] = None


class DashboardSnapshot(CamelModel):
    filters: Optional[FilterSelection] = None
    working_copy: List[AnalysisResult]
    active_store_type: Optional[StoreType] = None
    active_result: Optional[AnalysisResult] = None
    show_tabs: bool = False
    is_loading: bool = False
    error: Optional[str] = None


class SessionCreated(CamelModel):
    session_id: str
    dashboard: DashboardSnapshot


class FilterOptions(CamelModel):
    industries: List[str]
    store_types: List[StoreType]
    analysis_periods: List[AnalysisPeriod]
    defaults: FilterSelection
