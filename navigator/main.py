# navigator/main.py
# -----------------------------------------------------------------------------
# FastAPI 엔트리포인트
# - 서버 기동 시 로깅 설정
# - 모든 상태는 메모리(세션 단위)에만 존재
# -----------------------------------------------------------------------------
from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from navigator.core.config import settings
from navigator.core.logging import setup_logging
from navigator.routers import dashboard, options


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    if not settings.GEMINI_API_KEY and not settings.NAVIGATOR_FAKE_RESPONSE_FILE:
        logger.warning("[Startup] GEMINI_API_KEY 미설정: 분석 요청은 503 으로 응답합니다.")
    logger.info(f"[Startup] {settings.APP_NAME} ({settings.ENV})")
    yield


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

app.include_router(options.router)
app.include_router(dashboard.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
