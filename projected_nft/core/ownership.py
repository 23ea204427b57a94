"""Ownership gate: administrator and holder checks run before a mutation body."""
from projected_nft.core.errors import NotAuthorized, NotHolder
from projected_nft.core.ledger import TokenLedger
from projected_nft.models.token import RegistryState, is_null_address, normalize_address


class OwnershipGate:
    def __init__(self, state: RegistryState, ledger: TokenLedger) -> None:
        self._state = state
        self._ledger = ledger

    def is_administrator(self, caller: str) -> bool:
        admin = self._state.administrator
        return not is_null_address(admin) and normalize_address(caller) == admin

    def is_holder(self, token_id: int, caller: str) -> bool:
        """Raises NotFound when the token has no live record."""
        return self._ledger.owner_of(token_id) == normalize_address(caller)

    def require_administrator(self, caller: str) -> None:
        if not self.is_administrator(caller):
            raise NotAuthorized(f"{caller or '<anonymous>'} is not the administrator")

    def require_holder(self, token_id: int, caller: str) -> None:
        if not self.is_holder(token_id, caller):
            raise NotHolder(f"{caller or '<anonymous>'} is not the holder of token {token_id}")
