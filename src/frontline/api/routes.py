"""HTTP and websocket routes of the Frontline bridge."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request, WebSocket

from frontline.api.runtime import ApiState
from frontline.schemas import ClickRequest, GridSnapshot, KeyRequest

router = APIRouter()


def get_state(request: Request) -> ApiState:
    state = getattr(request.app.state, "api_state", None)
    if state is None:  # pragma: no cover - FastAPI should always initialise state
        raise RuntimeError("API state not initialised")
    return state


ApiStateDep = Annotated[ApiState, Depends(get_state)]


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Simple readiness check."""

    return {"status": "ok"}


@router.get("/grid", response_model=GridSnapshot)
async def read_grid(state: ApiStateDep) -> GridSnapshot:
    return state.session.snapshot()


@router.post("/updates", response_model=GridSnapshot)
async def post_update(payload: dict[str, Any], state: ApiStateDep) -> GridSnapshot:
    """Apply an update envelope delivered over HTTP instead of the websocket feed.

    Rejected envelopes surface as 422 through the app's error handler.
    """

    state.session.apply(payload)
    return state.session.snapshot()


# Input handlers stay async: the outbound queue must be fed from the event loop.
@router.post("/input/click", response_model=GridSnapshot)
async def click(request: ClickRequest, state: ApiStateDep) -> GridSnapshot:
    state.session.on_cell_clicked(request.index)
    return state.session.snapshot()


@router.post("/input/key", response_model=GridSnapshot)
async def key(request: KeyRequest, state: ApiStateDep) -> GridSnapshot:
    state.session.on_key_pressed(request.code)
    return state.session.snapshot()


@router.websocket("/ws")
async def server_feed(websocket: WebSocket) -> None:
    state: ApiState = websocket.app.state.api_state
    await state.serve_feed(websocket)
