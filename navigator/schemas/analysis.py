# navigator/schemas/analysis.py
# -----------------------------------------------------------------------------
# 분석 요청/결과 스키마
# - 외부(AI 응답, API)는 camelCase, 파이썬 내부는 snake_case
# - 금액 단위는 모두 만원
# -----------------------------------------------------------------------------
import math
from typing import Annotated, List

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from navigator.core.constants import INDUSTRIES, AnalysisPeriod, StoreType

STARTUP_COST_FIELDS = ("franchise_fee", "deposit", "interior", "other")
MONTHLY_COST_FIELDS = ("rent", "labor", "utilities")
EDITABLE_COST_FIELDS = STARTUP_COST_FIELDS + MONTHLY_COST_FIELDS


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _truncate_number(v):
    # AI 가 INTEGER 필드에 1200.0 / 1200.5 같은 값을 줄 때가 있음
    if isinstance(v, float) and math.isfinite(v):
        return int(v)
    return v


WholeNumber = Annotated[int, BeforeValidator(_truncate_number)]


class FilterSelection(CamelModel):
    """한 번의 분석 요청에 쓰이는 사용자 조건. 요청 단위로 불변."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    region: str = Field(..., min_length=1)
    industry: str
    store_types: List[StoreType] = Field(default_factory=list)
    analysis_period: AnalysisPeriod = AnalysisPeriod.MONTHLY

    @field_validator("region")
    @classmethod
    def _strip_region(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("region must not be blank")
        return v

    @field_validator("industry")
    @classmethod
    def _known_industry(cls, v: str) -> str:
        if v not in INDUSTRIES:
            raise ValueError(f"unknown industry: {v}")
        return v


class CompetitorBrand(CamelModel):
    brand_name: str
    count: WholeNumber = Field(0, ge=0)
    estimated_monthly_sales: WholeNumber = Field(0, ge=0)  # 점포당 월 평균 매출


class CostBreakdown(CamelModel):
    # 초기 창업 비용
    franchise_fee: WholeNumber = 0
    deposit: WholeNumber = 0
    interior: WholeNumber = 0
    other: WholeNumber = 0
    total_startup: WholeNumber = 0
    # 월 고정비
    rent: WholeNumber = 0
    labor: WholeNumber = 0
    utilities: WholeNumber = 0
    total_monthly: WholeNumber = 0

    def startup_sum(self) -> int:
        return sum(getattr(self, f) for f in STARTUP_COST_FIELDS)

    def monthly_sum(self) -> int:
        return sum(getattr(self, f) for f in MONTHLY_COST_FIELDS)

    def with_value(self, field: str, value: int) -> "CostBreakdown":
        """field 를 바꾼 새 객체. 두 합계는 항상 구성 항목에서 다시 계산."""
        updated = self.model_copy(update={field: value})
        updated.total_startup = updated.startup_sum()
        updated.total_monthly = updated.monthly_sum()
        return updated


class SalesPoint(CamelModel):
    period: str  # 예: 1일차, 1주차, 1월
    sales: WholeNumber = 0


class AnalysisResult(CamelModel):
    store_type: StoreType
    summary: str = ""
    population_density: str = ""
    floating_population: str = ""
    industry_closure_rate: float = 0
    new_business_survival_rate: float = Field(0, ge=0, le=100)
    competitor_distribution: List[CompetitorBrand] = Field(default_factory=list)
    success_rate: float = Field(0, ge=0, le=100)
    success_context: str = ""
    costs: CostBreakdown
    sales: List[SalesPoint] = Field(default_factory=list)
    recommendation: str = ""
