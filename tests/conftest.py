"""Pytest configuration and fixtures."""

from typing import List

import pytest
from fastapi.testclient import TestClient

from projected_nft.api.app import app
from projected_nft.api.state import AppState, get_state
from projected_nft.core.emitter import ObservationEmitter
from projected_nft.core.registry import Registry
from projected_nft.models.events import Event
from projected_nft.models.token import RegistryState

ADMIN = "0x00000000000000000000000000000000000000ad"
ALICE = "0x000000000000000000000000000000000000a11c"
BOB = "0x0000000000000000000000000000000000000b0b"
CAROL = "0x00000000000000000000000000000000000ca201"


@pytest.fixture
def events() -> List[Event]:
    """Events delivered to a test sink, in order."""
    return []


@pytest.fixture
def registry(events: List[Event]) -> Registry:
    """Fresh registry on chain 1 with ADMIN as administrator."""
    return Registry(
        state=RegistryState(administrator=ADMIN),
        emitter=ObservationEmitter([events.append]),
        chain_id=lambda: 1,
    )


@pytest.fixture
def app_state(monkeypatch: pytest.MonkeyPatch) -> AppState:
    """In-memory application state (no persistence)."""
    monkeypatch.setenv("PROJECTED_NFT_CHAIN_ID", "1")
    state = AppState(persist=False)
    state.registry = state._build_registry(RegistryState(administrator=ADMIN))
    return state


@pytest.fixture
def client(app_state: AppState):
    """API client bound to app_state; lifespan is not run."""
    app.dependency_overrides[get_state] = lambda: app_state
    yield TestClient(app)
    app.dependency_overrides.clear()
