"""Persist and load registry state (JSON)."""
import json
import logging
from pathlib import Path
from typing import Optional

from projected_nft.config import (
    ADMIN_ADDRESS,
    DEFAULT_BASE_EXTENSION,
    DEFAULT_BASE_URI,
    REGISTRY_STATE_PATH,
    ensure_data_dir,
)
from projected_nft.models.token import RegistryState, TokenRecord, is_null_address, normalize_address

logger = logging.getLogger(__name__)


def _path() -> Path:
    ensure_data_dir()
    return REGISTRY_STATE_PATH


def default_state() -> RegistryState:
    """Fresh state seeded from configuration."""
    return RegistryState(
        base_uri=DEFAULT_BASE_URI,
        base_extension=DEFAULT_BASE_EXTENSION,
        administrator=normalize_address(ADMIN_ADDRESS),
    )


def state_from_dict(data: dict) -> RegistryState:
    """Build state from its JSON form. Malformed token entries are skipped."""
    records = {}
    for item in data.get("records", []):
        try:
            record = TokenRecord(id=int(item["id"]), holder=normalize_address(item["holder"]))
        except (KeyError, TypeError, ValueError):
            continue
        if is_null_address(record.holder):
            continue
        records[record.id] = record
    next_id = int(data.get("next_id", 1))
    # Never hand out an id at or below one already on record
    if records:
        next_id = max(next_id, max(records) + 1)
    return RegistryState(
        next_id=next_id,
        live_count=len(records),
        base_uri=data.get("base_uri", DEFAULT_BASE_URI),
        base_extension=data.get("base_extension", DEFAULT_BASE_EXTENSION),
        administrator=normalize_address(data.get("administrator", ADMIN_ADDRESS)),
        records=records,
    )


def state_to_dict(state: RegistryState) -> dict:
    return {
        "next_id": state.next_id,
        "base_uri": state.base_uri,
        "base_extension": state.base_extension,
        "administrator": state.administrator,
        "records": [
            {"id": r.id, "holder": r.holder}
            for r in sorted(state.records.values(), key=lambda r: r.id)
        ],
    }


def load_state(path: Optional[Path] = None) -> RegistryState:
    """Load registry state from disk, or a fresh default state."""
    p = path or _path()
    if not p.exists():
        return default_state()
    try:
        data = json.loads(p.read_text())
        return state_from_dict(data)
    except (json.JSONDecodeError, OSError, TypeError, ValueError, AttributeError) as e:
        logger.warning("Could not load registry state from %s: %s", p, e)
        return default_state()


def save_state(state: RegistryState, path: Optional[Path] = None) -> None:
    """Write state atomically (temp file + replace). OSError propagates."""
    p = path or _path()
    tmp = p.with_suffix(p.suffix + ".tmp")
    tmp.write_text(json.dumps(state_to_dict(state), indent=2))
    tmp.replace(p)
