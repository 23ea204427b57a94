"""FastAPI app, CORS, and route registration."""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(name)s: %(message)s",
)

from projected_nft.api.state import AppState, get_state
from projected_nft.config import CHAIN_ID_ENV, ensure_data_dir
from projected_nft.core.network import current_chain_id

# Import routes after state to avoid circular imports
from projected_nft.api.routes import admin, metadata, registry, tokens

__all__ = ["app", "AppState", "get_state"]

_state = get_state()


@asynccontextmanager
async def lifespan(app: FastAPI):
    ensure_data_dir()
    _state.load_registry()
    registry_ = _state.registry
    logging.getLogger(__name__).info(
        "Registry loaded: next_id=%d total_supply=%d administrator=%s",
        registry_.current_next_id(),
        registry_.total_supply(),
        registry_.administrator() or "<none>",
    )
    try:
        logging.getLogger(__name__).info("Home chain id: %d", current_chain_id())
    except ValueError as e:
        logging.getLogger(__name__).error(
            "Invalid %s (URI resolution will fail until fixed): %s", CHAIN_ID_ENV, e
        )
    yield


app = FastAPI(
    title="Projected NFT Registry API",
    description="Mint, burn and resolve metadata URIs for home-network projected tokens",
    lifespan=lifespan,
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(registry.router, prefix="/api/registry", tags=["registry"])
app.include_router(tokens.router, prefix="/api/tokens", tags=["tokens"])
app.include_router(admin.router, prefix="/api/admin", tags=["admin"])
app.include_router(metadata.router, prefix="/api/metadata", tags=["metadata"])
