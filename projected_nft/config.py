"""Configuration: env, API binding, administrator, default metadata URI parts."""
import os
from pathlib import Path

from dotenv import load_dotenv

# Base paths (project root = parent of projected_nft package)
BASE_DIR = Path(__file__).resolve().parent.parent

# Load .env from project root so PROJECTED_NFT_ADMIN etc. are set
load_dotenv(BASE_DIR / ".env")
DATA_DIR = BASE_DIR / "data"
REGISTRY_STATE_PATH = DATA_DIR / "registry_state.json"

# API
API_HOST = os.getenv("PROJECTED_NFT_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("PROJECTED_NFT_API_PORT", "8000"))

# Registry defaults (only used when no saved state exists)
ADMIN_ADDRESS = os.getenv("PROJECTED_NFT_ADMIN", "")
DEFAULT_BASE_URI = os.getenv("PROJECTED_NFT_BASE_URI", "")
DEFAULT_BASE_EXTENSION = os.getenv("PROJECTED_NFT_BASE_EXTENSION", ".json")

# Home network: read at resolution time, see core.network
CHAIN_ID_ENV = "PROJECTED_NFT_CHAIN_ID"
DEFAULT_CHAIN_ID = 1

# Named external resolvers: "name=template;name2=template2", "{id}" is replaced
# e.g. "ipfs=ipfs://bafy.../{id}.json"
EXTERNAL_RESOLVERS = os.getenv("PROJECTED_NFT_RESOLVERS", "")

# Snapshot state to REGISTRY_STATE_PATH after every committed mutation
PERSIST_STATE = os.getenv("PROJECTED_NFT_PERSIST", "1").lower() in ("1", "true", "yes")

# Recent events kept for GET /api/metadata/events
EVENT_LOG_SIZE = int(os.getenv("PROJECTED_NFT_EVENT_LOG_SIZE", "256"))


def ensure_data_dir() -> None:
    DATA_DIR.mkdir(parents=True, exist_ok=True)
