# navigator/routers/options.py
# -----------------------------------------------------------------------------
# /options : 필터 패널 선택지와 기본값
# -----------------------------------------------------------------------------
from fastapi import APIRouter

from navigator.core.constants import (
    ANALYSIS_PERIODS,
    DEFAULT_REGION,
    INDUSTRIES,
    STORE_TYPES,
    AnalysisPeriod,
    StoreType,
)
from navigator.schemas.analysis import FilterSelection
from navigator.schemas.dashboard import FilterOptions

router = APIRouter(tags=["options"])


def default_filters() -> FilterSelection:
    return FilterSelection(
        region=DEFAULT_REGION,
        industry=INDUSTRIES[0],
        store_types=[StoreType.STANDARD],
        analysis_period=AnalysisPeriod.MONTHLY,
    )


@router.get("/options", response_model=FilterOptions)
async def get_options():
    return FilterOptions(
        industries=INDUSTRIES,
        store_types=STORE_TYPES,
        analysis_periods=ANALYSIS_PERIODS,
        defaults=default_filters(),
    )
