"""Token registry: identity & supply ledger, URI resolution, admin setters.

Every mutation runs as a transaction under one lock: the state is copied
first and restored if anything raises (including persistence), so a failed
call leaves counters, records and configuration untouched. Events queued
during the body are emitted only after commit.
"""
import logging
import threading
from contextlib import contextmanager
from typing import Callable, Iterator, List, Optional

from projected_nft.core.emitter import ObservationEmitter
from projected_nft.core.errors import InvalidRecipient, NotFound
from projected_nft.core.ledger import TokenLedger
from projected_nft.core.network import current_chain_id
from projected_nft.core.ownership import OwnershipGate
from projected_nft.core.resolver import ExternalResolver, compose_token_uri
from projected_nft.models.events import (
    AdministratorTransferred,
    BaseUriChanged,
    BatchMetadataUpdate,
    Event,
    MetadataUpdate,
    Minted,
)
from projected_nft.models.token import RegistryState, is_null_address, normalize_address

logger = logging.getLogger(__name__)


class Registry:
    def __init__(
        self,
        state: Optional[RegistryState] = None,
        emitter: Optional[ObservationEmitter] = None,
        chain_id: Callable[[], int] = current_chain_id,
        persist: Optional[Callable[[RegistryState], None]] = None,
    ) -> None:
        self._state = state if state is not None else RegistryState()
        self._state.administrator = normalize_address(self._state.administrator)
        self.emitter = emitter if emitter is not None else ObservationEmitter()
        self._chain_id = chain_id
        self._persist = persist
        self._lock = threading.RLock()
        self._pending: List[Event] = []
        self._depth = 0
        self.ledger = TokenLedger(self._state, self._queue)
        self.gate = OwnershipGate(self._state, self.ledger)

    def _queue(self, event: Event) -> None:
        self._pending.append(event)

    @contextmanager
    def _transaction(self) -> Iterator[RegistryState]:
        # Nested calls (e.g. a receiver hook minting) roll back only their own
        # changes; persistence and emission happen once, at the outermost level.
        with self._lock:
            nested = self._depth > 0
            snapshot = self._state.copy()
            mark = len(self._pending)
            self._depth += 1
            try:
                yield self._state
                if not nested and self._persist is not None:
                    self._persist(self._state)
            except Exception:
                self._state.restore(snapshot)
                del self._pending[mark:]
                raise
            finally:
                self._depth -= 1
            if nested:
                return
            events, self._pending = self._pending, []
        for event in events:
            self.emitter.emit(event)

    # --- Identity & supply -------------------------------------------------

    def mint(self, to: str, initial_data: str = "", aux_data: bytes = b"", operator: str = "") -> int:
        """Issue the next id to `to` and return it.

        Raises InvalidRecipient for the null address and ReceiverRejected when
        a registered receiver hook refuses the token.
        """
        if is_null_address(to):
            raise InvalidRecipient("Cannot mint to the null address")
        with self._transaction() as state:
            token_id = state.next_id
            record = self.ledger.create_record(token_id, to)
            state.live_count += 1
            state.next_id += 1
            self.ledger.safe_check_receiver(record.holder, token_id, aux_data, operator)
            self._queue(Minted(id=token_id, data=initial_data))
        logger.info("Minted token %d to %s", token_id, record.holder)
        return token_id

    def burn(self, token_id: int, caller: str) -> None:
        """Destroy a token. Only its holder may burn; ids are never reissued."""
        with self._transaction() as state:
            self.gate.require_holder(token_id, caller)
            self.ledger.remove_record(token_id)
            state.live_count -= 1
        logger.info("Burned token %d", token_id)

    def transfer(self, token_id: int, caller: str, to: str) -> None:
        with self._transaction():
            self.ledger.transfer(token_id, caller, to)

    def owner_of(self, token_id: int) -> str:
        with self._lock:
            return self.ledger.owner_of(token_id)

    def exists(self, token_id: int) -> bool:
        with self._lock:
            return self.ledger.exists(token_id)

    # --- URI resolution ----------------------------------------------------

    def resolve_default(self, token_id: int) -> str:
        with self._lock:
            base = self._state.base_uri
            return self.resolve_with_base(token_id, base)

    def resolve_with_base(self, token_id: int, custom_base: str) -> str:
        with self._lock:
            if not self.ledger.exists(token_id):
                raise NotFound(token_id)
            extension = self._state.base_extension
        uri = compose_token_uri(token_id, custom_base, self._chain_id(), extension)
        logger.debug("Resolved token %d -> %s", token_id, uri)
        return uri

    def resolve_with_external(self, token_id: int, resolver: ExternalResolver) -> str:
        """Delegate entirely; the resolver owns existence checks."""
        return resolver.tokenURI(token_id)

    # --- Administration ----------------------------------------------------

    def set_base_uri(self, new_uri: str, caller: str) -> None:
        with self._transaction() as state:
            self.gate.require_administrator(caller)
            old, state.base_uri = state.base_uri, new_uri
            self._queue(BaseUriChanged(old=old, new=new_uri))
        logger.info("Base URI changed: %r -> %r", old, new_uri)

    def set_base_extension(self, new_ext: str, caller: str) -> None:
        with self._transaction() as state:
            self.gate.require_administrator(caller)
            old, state.base_extension = state.base_extension, new_ext
            self._queue(BaseUriChanged(old=old, new=new_ext))
        logger.info("Base extension changed: %r -> %r", old, new_ext)

    def transfer_administrator(self, new_admin: str, caller: str) -> None:
        with self._transaction() as state:
            self.gate.require_administrator(caller)
            if is_null_address(new_admin):
                raise InvalidRecipient("Administrator cannot be the null address")
            previous, state.administrator = state.administrator, normalize_address(new_admin)
            self._queue(AdministratorTransferred(previous=previous, new=state.administrator))
        logger.info("Administrator transferred %s -> %s", previous, normalize_address(new_admin))

    # --- Metadata refresh hints (no state, no authorization) ---------------

    def _emit_after_commit(self, event: Event) -> None:
        # Inside a transaction on this thread: hold until the outermost commit
        with self._lock:
            if self._depth > 0:
                self._queue(event)
                return
        self.emitter.emit(event)

    def notify_updated(self, token_id: int) -> None:
        self._emit_after_commit(MetadataUpdate(id=token_id))

    def notify_batch_updated(self, from_id: int, to_id: int) -> None:
        self._emit_after_commit(BatchMetadataUpdate(from_id=from_id, to_id=to_id))

    # --- Read accessors ----------------------------------------------------

    def current_next_id(self) -> int:
        return self._state.next_id

    def total_supply(self) -> int:
        return self._state.live_count

    def base_uri(self) -> str:
        return self._state.base_uri

    def base_extension(self) -> str:
        return self._state.base_extension

    def administrator(self) -> str:
        return self._state.administrator

    def snapshot(self) -> RegistryState:
        with self._lock:
            return self._state.copy()
