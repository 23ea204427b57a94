"""Base token ledger: ownership lookup, safe issuance, removal and single transfer.

Operates on the RegistryState it is given; the Registry owns locking and
rollback. Transfer events are handed to `emit`, which the Registry queues
until the surrounding mutation commits.
"""
import logging
from typing import Callable, Dict

from projected_nft.core.errors import InvalidRecipient, NotFound, NotHolder, ReceiverRejected
from projected_nft.models.events import Event, Transfer
from projected_nft.models.token import (
    ZERO_ADDRESS,
    RegistryState,
    TokenRecord,
    is_null_address,
    normalize_address,
)

logger = logging.getLogger(__name__)

# (operator, from_address, token_id, aux_data) -> accepted
ReceiverHook = Callable[[str, str, int, bytes], bool]


class TokenLedger:
    def __init__(self, state: RegistryState, emit: Callable[[Event], None]) -> None:
        self._state = state
        self._emit = emit
        self._receivers: Dict[str, ReceiverHook] = {}

    def register_receiver(self, address: str, hook: ReceiverHook) -> None:
        """Mark address as contract-like; hook decides whether it accepts tokens."""
        self._receivers[normalize_address(address)] = hook

    def unregister_receiver(self, address: str) -> None:
        self._receivers.pop(normalize_address(address), None)

    def exists(self, token_id: int) -> bool:
        return token_id in self._state.records

    def owner_of(self, token_id: int) -> str:
        record = self._state.records.get(token_id)
        if record is None:
            raise NotFound(token_id)
        return record.holder

    def safe_check_receiver(self, holder: str, token_id: int, aux_data: bytes, operator: str = "") -> None:
        """Raise ReceiverRejected unless holder is a plain account or its hook accepts."""
        hook = self._receivers.get(normalize_address(holder))
        if hook is None:
            return
        try:
            accepted = hook(normalize_address(operator), ZERO_ADDRESS, token_id, aux_data)
        except Exception as e:
            raise ReceiverRejected(f"Receiver {holder} reverted: {e}") from e
        if accepted is not True:
            raise ReceiverRejected(f"Receiver {holder} did not accept token {token_id}")

    def create_record(self, token_id: int, holder: str) -> TokenRecord:
        holder = normalize_address(holder)
        if is_null_address(holder):
            raise InvalidRecipient("Cannot issue to the null address")
        if token_id in self._state.records:
            # Unreachable through the registry: ids come from a monotonic counter
            raise ValueError(f"Token {token_id} already exists")
        record = TokenRecord(id=token_id, holder=holder)
        self._state.records[token_id] = record
        self._emit(Transfer(from_address=ZERO_ADDRESS, to_address=holder, id=token_id))
        return record

    def remove_record(self, token_id: int) -> TokenRecord:
        record = self._state.records.pop(token_id, None)
        if record is None:
            raise NotFound(token_id)
        self._emit(Transfer(from_address=record.holder, to_address=ZERO_ADDRESS, id=token_id))
        return record

    def transfer(self, token_id: int, caller: str, to: str) -> TokenRecord:
        """Move a token from its holder (the caller) to `to`. No approvals."""
        holder = self.owner_of(token_id)
        if normalize_address(caller) != holder:
            raise NotHolder(f"{caller} is not the holder of token {token_id}")
        to = normalize_address(to)
        if is_null_address(to):
            raise InvalidRecipient("Cannot transfer to the null address")
        record = TokenRecord(id=token_id, holder=to)
        self._state.records[token_id] = record
        self._emit(Transfer(from_address=holder, to_address=to, id=token_id))
        logger.info("Token %d transferred %s -> %s", token_id, holder, to)
        return record
