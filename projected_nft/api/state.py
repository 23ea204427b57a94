"""Shared application state (injected into routes)."""
from pathlib import Path
from typing import Dict, Optional

from fastapi import Header

from projected_nft.config import EVENT_LOG_SIZE, EXTERNAL_RESOLVERS, PERSIST_STATE
from projected_nft.core.emitter import EventLog, ObservationEmitter
from projected_nft.core.registry import Registry
from projected_nft.core.registry_store import default_state, load_state, save_state
from projected_nft.core.resolver import ExternalResolver, parse_resolver_templates
from projected_nft.models.token import RegistryState


class AppState:
    def __init__(self, persist: bool = PERSIST_STATE, state_path: Optional[Path] = None) -> None:
        self.event_log = EventLog(maxlen=EVENT_LOG_SIZE)
        self._persist = persist
        self._state_path = state_path
        self._resolvers: Dict[str, ExternalResolver] = dict(
            parse_resolver_templates(EXTERNAL_RESOLVERS)
        )
        self.registry = self._build_registry(default_state())

    def _build_registry(self, state: RegistryState) -> Registry:
        emitter = ObservationEmitter([self.event_log])
        persist = self._save if self._persist else None
        return Registry(state=state, emitter=emitter, persist=persist)

    def _save(self, state: RegistryState) -> None:
        save_state(state, self._state_path)

    def load_registry(self) -> None:
        """Replace the registry with the saved state (or defaults)."""
        state = load_state(self._state_path) if self._persist else default_state()
        self.registry = self._build_registry(state)

    def register_resolver(self, name: str, resolver: ExternalResolver) -> None:
        self._resolvers[name] = resolver

    def get_resolver(self, name: str) -> ExternalResolver | None:
        return self._resolvers.get(name)

    def resolver_names(self) -> list[str]:
        return sorted(self._resolvers)


_state = AppState()


def get_state() -> AppState:
    return _state


def get_caller(x_caller: str = Header(default="")) -> str:
    """Caller identity from the X-Caller header (empty if absent)."""
    return x_caller
