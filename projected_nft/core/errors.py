"""Registry failures. Any of these aborts the call with state unchanged."""


class RegistryError(Exception):
    pass


class InvalidRecipient(RegistryError):
    """Mint, transfer or admin handover target is the null identity."""


class ReceiverRejected(RegistryError):
    """A contract-like recipient refused safe receipt of a token."""


class NotFound(RegistryError):
    """No live record for the token id."""

    def __init__(self, token_id: int) -> None:
        super().__init__(f"Token {token_id} not found")
        self.token_id = token_id


class NotHolder(RegistryError):
    """Caller is not the token's current holder."""


class NotAuthorized(RegistryError):
    """Caller lacks the administrator capability."""
