"""Observation events emitted by the registry and its ledger."""
from dataclasses import asdict, dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Minted:
    id: int
    data: str

    name = "Minted"


@dataclass(frozen=True)
class BaseUriChanged:
    """Emitted for both base URI and base extension changes."""
    old: str
    new: str

    name = "BaseUriChanged"


@dataclass(frozen=True)
class BatchMetadataUpdate:
    from_id: int
    to_id: int

    name = "BatchMetadataUpdate"


@dataclass(frozen=True)
class MetadataUpdate:
    id: int

    name = "MetadataUpdate"


@dataclass(frozen=True)
class Transfer:
    """Native ledger event; from/to is the zero address on mint/burn."""
    from_address: str
    to_address: str
    id: int

    name = "Transfer"


@dataclass(frozen=True)
class AdministratorTransferred:
    previous: str
    new: str

    name = "AdministratorTransferred"


Event = Union[
    Minted,
    BaseUriChanged,
    BatchMetadataUpdate,
    MetadataUpdate,
    Transfer,
    AdministratorTransferred,
]


def event_to_dict(event: Event) -> dict[str, Any]:
    return {"event": event.name, **asdict(event)}
