# navigator/core/constants.py
# -----------------------------------------------------------------------------
# 필터 선택지/기본값 카탈로그
# - 점포 유형/분석 주기 값은 화면과 프롬프트에 그대로 쓰이는 한글 라벨
# -----------------------------------------------------------------------------
from enum import Enum


class StoreType(str, Enum):
    DELIVERY = "배달전문"
    TAKEOUT = "테이크아웃"
    STANDARD = "일반점포"


class AnalysisPeriod(str, Enum):
    DAILY = "일간"
    WEEKLY = "주간"
    MONTHLY = "월간"
    YEARLY = "연간"


INDUSTRIES = [
    "치킨",
    "커피전문점",
    "피자",
    "편의점",
    "한식",
    "분식",
    "일식",
    "중식",
    "베이커리",
    "PC방",
    "만화카페",
]

STORE_TYPES = [StoreType.DELIVERY, StoreType.TAKEOUT, StoreType.STANDARD]

ANALYSIS_PERIODS = [
    AnalysisPeriod.DAILY,
    AnalysisPeriod.WEEKLY,
    AnalysisPeriod.MONTHLY,
    AnalysisPeriod.YEARLY,
]

DEFAULT_REGION = "서울시 강남구 역삼동"

# 모든 금액 단위
MONEY_UNIT = "만원"
