"""Home network identifier, read from the environment at resolution time."""
import os

from projected_nft.config import CHAIN_ID_ENV, DEFAULT_CHAIN_ID


def parse_chain_id(raw: str) -> int:
    """Decimal ("137", "010") or 0x-prefixed hex ("0x89")."""
    value = raw.strip()
    if value.lower().startswith("0x"):
        return int(value[2:], 16)
    return int(value)


def current_chain_id() -> int:
    """EIP-155 chain id of the network this registry runs under.

    Not registry state: changing PROJECTED_NFT_CHAIN_ID changes every
    subsequently resolved URI without touching stored configuration.
    """
    raw = os.getenv(CHAIN_ID_ENV, "").strip()
    if not raw:
        return DEFAULT_CHAIN_ID
    return parse_chain_id(raw)
