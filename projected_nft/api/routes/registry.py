"""Registry counters and configuration."""
from fastapi import APIRouter, Depends

from projected_nft.api.state import AppState, get_state
from projected_nft.core.network import current_chain_id

router = APIRouter()


@router.get("/")
def get_registry(state: AppState = Depends(get_state)):
    # One locked copy so counters and configuration come from the same commit
    snap = state.registry.snapshot()
    return {
        "next_id": snap.next_id,
        "total_supply": snap.live_count,
        "base_uri": snap.base_uri,
        "base_extension": snap.base_extension,
        "administrator": snap.administrator,
        "chain_id": current_chain_id(),
        "resolvers": state.resolver_names(),
    }
