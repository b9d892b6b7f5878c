"""Rest timer endpoints."""

from fastapi import APIRouter, Depends

from strongai.api.deps import get_timer
from strongai.core.constants import REST_DURATIONS
from strongai.schemas.timer import TimerAddRequest, TimerStartRequest, TimerState
from strongai.services.rest_timer import RestTimer

router = APIRouter()


@router.get("", response_model=TimerState)
async def get_timer_state(timer: RestTimer = Depends(get_timer)):
    return timer.snapshot()


@router.post("/start", response_model=TimerState)
async def start_timer(payload: TimerStartRequest, timer: RestTimer = Depends(get_timer)):
    timer.start(payload.seconds)
    return timer.snapshot()


@router.post("/pause", response_model=TimerState)
async def pause_timer(timer: RestTimer = Depends(get_timer)):
    timer.pause()
    return timer.snapshot()


@router.post("/resume", response_model=TimerState)
async def resume_timer(timer: RestTimer = Depends(get_timer)):
    timer.resume()
    return timer.snapshot()


@router.post("/add", response_model=TimerState)
async def add_time(payload: TimerAddRequest | None = None, timer: RestTimer = Depends(get_timer)):
    """Add seconds (30 by default); starts a fresh countdown if the timer is stopped."""
    timer.add_time((payload or TimerAddRequest()).seconds)
    return timer.snapshot()


@router.post("/stop", response_model=TimerState)
async def stop_timer(timer: RestTimer = Depends(get_timer)):
    timer.stop()
    return timer.snapshot()


@router.get("/presets", response_model=list[int])
async def rest_presets():
    """Rest durations offered when configuring an exercise (seconds)."""
    return list(REST_DURATIONS)
