"""Core services: registry, ledger, ownership gate, resolver, event emitter."""
from projected_nft.core.emitter import EventLog, ObservationEmitter
from projected_nft.core.registry import Registry

__all__ = ["Registry", "ObservationEmitter", "EventLog"]
