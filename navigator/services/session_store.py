# navigator/services/session_store.py
# -----------------------------------------------------------------------------
# 페이지 세션별 대시보드 상태 (메모리 보관, 재시작 시 소멸)
# -----------------------------------------------------------------------------
from __future__ import annotations

import uuid
from typing import Dict

from loguru import logger

from navigator.core.errors import SessionNotFoundError
from navigator.services.reconciler import DashboardState


class SessionStore:
    def __init__(self):
        self._sessions: Dict[str, DashboardState] = {}

    def create(self) -> tuple[str, DashboardState]:
        session_id = uuid.uuid4().hex
        state = DashboardState()
        self._sessions[session_id] = state
        logger.info(f"[Dashboard] 세션 생성 {session_id}")
        return session_id, state

    def get(self, session_id: str) -> DashboardState:
        try:
            return self._sessions[session_id]
        except KeyError:
            raise SessionNotFoundError(session_id) from None

    def drop(self, session_id: str) -> None:
        if self._sessions.pop(session_id, None) is None:
            raise SessionNotFoundError(session_id)
        logger.info(f"[Dashboard] 세션 종료 {session_id}")

    def __len__(self) -> int:
        return len(self._sessions)


session_store = SessionStore()
