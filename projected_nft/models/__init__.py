"""Data models for token records, registry state, and events."""
from projected_nft.models.events import (
    AdministratorTransferred,
    BaseUriChanged,
    BatchMetadataUpdate,
    Event,
    MetadataUpdate,
    Minted,
    Transfer,
)
from projected_nft.models.token import RegistryState, TokenRecord

__all__ = [
    "TokenRecord",
    "RegistryState",
    "Event",
    "Minted",
    "BaseUriChanged",
    "BatchMetadataUpdate",
    "MetadataUpdate",
    "Transfer",
    "AdministratorTransferred",
]
