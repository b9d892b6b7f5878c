"""Dashboard widget configuration endpoints."""

from __future__ import annotations

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from strongai.api.deps import get_store
from strongai.schemas.widget import WidgetConfiguration, WidgetCreate, WidgetOrder
from strongai.services.store import FitnessStore

router = APIRouter()


@router.get("", response_model=list[WidgetConfiguration])
async def list_widgets(store: FitnessStore = Depends(get_store)):
    return store.widgets


@router.post("", response_model=WidgetConfiguration, status_code=201)
async def add_widget(payload: WidgetCreate, store: FitnessStore = Depends(get_store)):
    """Append a tile at the end of the dashboard."""
    return await store.add_widget(payload)


@router.put("/order", response_model=list[WidgetConfiguration])
async def reorder_widgets(payload: WidgetOrder, store: FitnessStore = Depends(get_store)):
    widgets = await store.reorder_widgets(payload.widget_ids)
    if widgets is None:
        raise HTTPException(status_code=422, detail="widget_ids must list every widget exactly once")
    return widgets


@router.delete("/{widget_id}", status_code=204)
async def remove_widget(widget_id: UUID, store: FitnessStore = Depends(get_store)):
    if not await store.remove_widget(widget_id):
        raise HTTPException(status_code=404, detail="Widget not found")
