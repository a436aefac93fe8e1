# navigator/routers/dashboard.py
# -----------------------------------------------------------------------------
# /dashboard : 세션 생성/조회, 분석 실행, 탭 선택, 비용 수정
# - 분석 실패는 고정 메시지만 응답 (원본 오류는 서버 로그)
# -----------------------------------------------------------------------------
from fastapi import APIRouter, Depends, HTTPException

from navigator.core.deps import get_generator, get_session_store
from navigator.core.errors import (
    AnalysisError,
    AnalysisInProgressError,
    InvalidCostFieldError,
    NavigatorError,
    SessionNotFoundError,
    UnknownStoreTypeError,
)
from navigator.schemas.analysis import FilterSelection
from navigator.schemas.dashboard import (
    CostEditRequest,
    DashboardSnapshot,
    SessionCreated,
    TabSelectRequest,
)
from navigator.services.analyzer import run_analysis
from navigator.services.gemini import TextGenerator
from navigator.services.reconciler import DashboardState
from navigator.services.session_store import SessionStore

router = APIRouter(prefix="/dashboard", tags=["dashboard"])

_STATUS = {
    AnalysisError: 502,
    AnalysisInProgressError: 409,
    SessionNotFoundError: 404,
    UnknownStoreTypeError: 404,
    InvalidCostFieldError: 422,
}


def _http_error(e: NavigatorError) -> HTTPException:
    status = next((s for cls, s in _STATUS.items() if isinstance(e, cls)), 500)
    return HTTPException(status_code=status, detail=e.to_dict())


def _snapshot(state: DashboardState) -> DashboardSnapshot:
    return DashboardSnapshot.model_validate(state.snapshot())


def _state(session_id: str, store: SessionStore) -> DashboardState:
    try:
        return store.get(session_id)
    except SessionNotFoundError as e:
        raise _http_error(e)


@router.post("/sessions", response_model=SessionCreated, status_code=201)
async def create_session(store: SessionStore = Depends(get_session_store)):
    session_id, state = store.create()
    return SessionCreated(session_id=session_id, dashboard=_snapshot(state))


@router.get("/{session_id}", response_model=DashboardSnapshot)
async def get_dashboard(
    session_id: str, store: SessionStore = Depends(get_session_store)
):
    return _snapshot(_state(session_id, store))


@router.delete("/{session_id}", status_code=204)
async def drop_session(
    session_id: str, store: SessionStore = Depends(get_session_store)
):
    try:
        store.drop(session_id)
    except SessionNotFoundError as e:
        raise _http_error(e)


@router.post("/{session_id}/analysis", response_model=DashboardSnapshot)
async def analyze(
    session_id: str,
    filters: FilterSelection,
    store: SessionStore = Depends(get_session_store),
    generator: TextGenerator = Depends(get_generator),
):
    state = _state(session_id, store)
    try:
        await run_analysis(state, filters, generator)
    except NavigatorError as e:
        raise _http_error(e)
    return _snapshot(state)


@router.put("/{session_id}/tab", response_model=DashboardSnapshot)
async def select_tab(
    session_id: str,
    req: TabSelectRequest,
    store: SessionStore = Depends(get_session_store),
):
    state = _state(session_id, store)
    try:
        state.select_tab(req.store_type)
    except NavigatorError as e:
        raise _http_error(e)
    return _snapshot(state)


@router.patch("/{session_id}/costs", response_model=DashboardSnapshot)
async def edit_cost(
    session_id: str,
    req: CostEditRequest,
    store: SessionStore = Depends(get_session_store),
):
    state = _state(session_id, store)
    try:
        state.edit_cost(req.field, req.value)
    except NavigatorError as e:
        raise _http_error(e)
    return _snapshot(state)
