"""Map registry failures to HTTP errors."""
from fastapi import HTTPException

from projected_nft.core.errors import (
    InvalidRecipient,
    NotAuthorized,
    NotFound,
    NotHolder,
    ReceiverRejected,
    RegistryError,
)

_STATUS = {
    NotFound: 404,
    NotHolder: 403,
    NotAuthorized: 403,
    InvalidRecipient: 400,
    ReceiverRejected: 400,
}


def http_error(e: RegistryError) -> HTTPException:
    status = next((code for cls, code in _STATUS.items() if isinstance(e, cls)), 400)
    return HTTPException(status_code=status, detail=f"{type(e).__name__}: {e}")
