"""Token records and the registry state they live in."""
from dataclasses import dataclass, field
from typing import Dict

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


def normalize_address(address: str | None) -> str:
    """Canonical form for comparison and storage (strip, lower)."""
    return (address or "").strip().lower()


def is_null_address(address: str | None) -> bool:
    """True for the empty identity or a 0x-prefixed all-zero address."""
    a = normalize_address(address)
    if not a:
        return True
    if a.startswith("0x"):
        digits = a[2:]
        return not digits or set(digits) == {"0"}
    return False


@dataclass(frozen=True)
class TokenRecord:
    """One live token: identifier and current holder."""
    id: int
    holder: str


@dataclass
class RegistryState:
    """All mutable registry fields. Only the registry mutates this."""
    next_id: int = 1
    live_count: int = 0
    base_uri: str = ""
    base_extension: str = ".json"
    administrator: str = ""
    records: Dict[int, TokenRecord] = field(default_factory=dict)

    def copy(self) -> "RegistryState":
        return RegistryState(
            next_id=self.next_id,
            live_count=self.live_count,
            base_uri=self.base_uri,
            base_extension=self.base_extension,
            administrator=self.administrator,
            records=dict(self.records),
        )

    def restore(self, other: "RegistryState") -> None:
        """Overwrite fields in place so existing references see the rollback."""
        self.next_id = other.next_id
        self.live_count = other.live_count
        self.base_uri = other.base_uri
        self.base_extension = other.base_extension
        self.administrator = other.administrator
        self.records = dict(other.records)
