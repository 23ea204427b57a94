"""Administrator-only configuration endpoints."""
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from projected_nft.api.errors import http_error
from projected_nft.api.state import AppState, get_caller, get_state
from projected_nft.core.errors import RegistryError

router = APIRouter()


class ValueBody(BaseModel):
    value: str


class AdministratorBody(BaseModel):
    new_admin: str


@router.put("/base-uri")
def put_base_uri(
    body: ValueBody,
    state: AppState = Depends(get_state),
    caller: str = Depends(get_caller),
):
    try:
        state.registry.set_base_uri(body.value, caller)
    except RegistryError as e:
        raise http_error(e)
    return {"base_uri": state.registry.base_uri()}


@router.put("/base-extension")
def put_base_extension(
    body: ValueBody,
    state: AppState = Depends(get_state),
    caller: str = Depends(get_caller),
):
    try:
        state.registry.set_base_extension(body.value, caller)
    except RegistryError as e:
        raise http_error(e)
    return {"base_extension": state.registry.base_extension()}


@router.put("/administrator")
def put_administrator(
    body: AdministratorBody,
    state: AppState = Depends(get_state),
    caller: str = Depends(get_caller),
):
    """Hand the administrator capability to another address."""
    try:
        state.registry.transfer_administrator(body.new_admin, caller)
    except RegistryError as e:
        raise http_error(e)
    return {"administrator": state.registry.administrator()}
