# navigator/core/deps.py
# -----------------------------------------------------------------------------
# FastAPI Depends 주입용 프로바이더
# - 테스트에서는 app.dependency_overrides 로 생성기/세션 저장소를 교체
# -----------------------------------------------------------------------------
from functools import lru_cache

from fastapi import HTTPException

from navigator.core.errors import ConfigurationError
from navigator.services.gemini import TextGenerator, build_generator
from navigator.services.session_store import SessionStore, session_store


@lru_cache
def _cached_generator() -> TextGenerator:
    return build_generator()


def get_generator() -> TextGenerator:
    try:
        return _cached_generator()
    except ConfigurationError as e:
        raise HTTPException(status_code=503, detail=e.to_dict())


def get_session_store() -> SessionStore:
    return session_store
