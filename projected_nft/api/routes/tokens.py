"""Token lifecycle and URI resolution endpoints."""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from projected_nft.api.errors import http_error
from projected_nft.api.state import AppState, get_caller, get_state
from projected_nft.core.errors import RegistryError

router = APIRouter()


class MintBody(BaseModel):
    to: str
    initial_data: str = ""
    aux_data_hex: str = ""


class TransferBody(BaseModel):
    to: str


def _parse_hex(value: str) -> bytes:
    v = value.strip()
    if v.lower().startswith("0x"):
        v = v[2:]
    try:
        return bytes.fromhex(v)
    except ValueError:
        raise HTTPException(status_code=400, detail="aux_data_hex is not valid hex")


@router.post("/")
def mint(
    body: MintBody,
    state: AppState = Depends(get_state),
    caller: str = Depends(get_caller),
):
    """Mint the next token id to `to`."""
    aux_data = _parse_hex(body.aux_data_hex)
    registry = state.registry
    try:
        token_id = registry.mint(body.to, body.initial_data, aux_data, operator=caller)
    except RegistryError as e:
        raise http_error(e)
    return {
        "id": token_id,
        "holder": registry.owner_of(token_id),
        "total_supply": registry.total_supply(),
        "next_id": registry.current_next_id(),
    }


@router.get("/{token_id}")
def get_token(token_id: int, state: AppState = Depends(get_state)):
    try:
        holder = state.registry.owner_of(token_id)
    except RegistryError as e:
        raise http_error(e)
    return {"id": token_id, "holder": holder}


@router.delete("/{token_id}", status_code=204)
def burn(
    token_id: int,
    state: AppState = Depends(get_state),
    caller: str = Depends(get_caller),
):
    """Burn a token. Caller (X-Caller) must be its holder."""
    try:
        state.registry.burn(token_id, caller)
    except RegistryError as e:
        raise http_error(e)


@router.post("/{token_id}/transfer")
def transfer(
    token_id: int,
    body: TransferBody,
    state: AppState = Depends(get_state),
    caller: str = Depends(get_caller),
):
    try:
        state.registry.transfer(token_id, caller, body.to)
        holder = state.registry.owner_of(token_id)
    except RegistryError as e:
        raise http_error(e)
    return {"id": token_id, "holder": holder}


@router.get("/{token_id}/uri")
def token_uri(
    token_id: int,
    base: Optional[str] = None,
    resolver: Optional[str] = None,
    state: AppState = Depends(get_state),
):
    """Resolve metadata URI: default base, explicit `base`, or a named external resolver."""
    if base is not None and resolver is not None:
        raise HTTPException(status_code=400, detail="Provide base or resolver, not both")
    registry = state.registry
    try:
        if resolver is not None:
            ext = state.get_resolver(resolver)
            if ext is None:
                raise HTTPException(status_code=404, detail=f"Unknown resolver: {resolver}")
            uri = registry.resolve_with_external(token_id, ext)
        elif base is not None:
            uri = registry.resolve_with_base(token_id, base)
        else:
            uri = registry.resolve_default(token_id)
    except RegistryError as e:
        raise http_error(e)
    return {"id": token_id, "uri": uri}
