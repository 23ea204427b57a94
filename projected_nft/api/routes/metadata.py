"""Metadata refresh hints and recent event feed for indexers."""
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from projected_nft.api.state import AppState, get_state
from projected_nft.models.events import event_to_dict

router = APIRouter()


class RefreshBody(BaseModel):
    id: int


class RefreshBatchBody(BaseModel):
    from_id: int
    to_id: int


@router.post("/refresh")
def refresh(body: RefreshBody, state: AppState = Depends(get_state)):
    """Emit MetadataUpdate. Open to any caller."""
    state.registry.notify_updated(body.id)
    return {"ok": True}


@router.post("/refresh-batch")
def refresh_batch(body: RefreshBatchBody, state: AppState = Depends(get_state)):
    """Emit BatchMetadataUpdate. Open to any caller."""
    state.registry.notify_batch_updated(body.from_id, body.to_id)
    return {"ok": True}


@router.get("/events")
def recent_events(limit: Optional[int] = None, state: AppState = Depends(get_state)):
    return [event_to_dict(e) for e in state.event_log.recent(limit)]
