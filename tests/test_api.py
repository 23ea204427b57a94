"""Tests for the REST API."""

from fastapi.testclient import TestClient

from projected_nft.api.state import AppState
from projected_nft.core.resolver import CallableResolver, TemplateResolver

from conftest import ADMIN, ALICE, BOB


def _mint(client: TestClient, to: str, **extra) -> dict:
    r = client.post("/api/tokens/", json={"to": to, **extra})
    assert r.status_code == 200, r.text
    return r.json()


def test_registry_summary(client: TestClient) -> None:
    r = client.get("/api/registry/")
    assert r.status_code == 200
    body = r.json()
    assert body["next_id"] == 1
    assert body["total_supply"] == 0
    assert body["base_extension"] == ".json"
    assert body["administrator"] == ADMIN
    assert body["chain_id"] == 1


def test_mint_get_burn_flow(client: TestClient) -> None:
    assert _mint(client, ALICE) == {"id": 1, "holder": ALICE, "total_supply": 1, "next_id": 2}
    assert _mint(client, BOB)["id"] == 2

    assert client.get("/api/tokens/1").json() == {"id": 1, "holder": ALICE}

    r = client.delete("/api/tokens/1", headers={"X-Caller": BOB})
    assert r.status_code == 403
    r = client.delete("/api/tokens/1", headers={"X-Caller": ALICE})
    assert r.status_code == 204

    assert client.get("/api/tokens/1").status_code == 404
    assert client.get("/api/tokens/1/uri").status_code == 404
    assert client.delete("/api/tokens/1", headers={"X-Caller": ALICE}).status_code == 404
    assert _mint(client, ALICE)["id"] == 3


def test_mint_errors(client: TestClient, app_state: AppState) -> None:
    r = client.post("/api/tokens/", json={"to": "0x0000000000000000000000000000000000000000"})
    assert r.status_code == 400
    assert r.json()["detail"].startswith("InvalidRecipient")

    r = client.post("/api/tokens/", json={"to": ALICE, "aux_data_hex": "zz"})
    assert r.status_code == 400

    app_state.registry.ledger.register_receiver(BOB, lambda *args: False)
    r = client.post("/api/tokens/", json={"to": BOB, "aux_data_hex": "0xbeef"})
    assert r.status_code == 400
    assert r.json()["detail"].startswith("ReceiverRejected")
    assert app_state.registry.current_next_id() == 1


def test_transfer(client: TestClient) -> None:
    _mint(client, ALICE)
    r = client.post("/api/tokens/1/transfer", json={"to": BOB}, headers={"X-Caller": ALICE})
    assert r.status_code == 200
    assert r.json()["holder"] == BOB
    r = client.post("/api/tokens/1/transfer", json={"to": ALICE}, headers={"X-Caller": ALICE})
    assert r.status_code == 403


def test_uri_strategies(client: TestClient, app_state: AppState) -> None:
    for _ in range(5):
        _mint(client, ALICE)
    app_state.register_resolver("ar", TemplateResolver("ar://tx/{id}"))

    assert client.get("/api/tokens/5/uri").json()["uri"] == ".json"
    assert client.get("/api/tokens/5/uri", params={"base": "https://x/"}).json()["uri"] == (
        "https://x/eip155:1/5.json"
    )
    assert client.get("/api/tokens/5/uri", params={"base": ""}).json()["uri"] == ".json"
    assert client.get("/api/tokens/77/uri", params={"resolver": "ar"}).json()["uri"] == "ar://tx/77"

    assert client.get("/api/tokens/5/uri", params={"resolver": "nope"}).status_code == 404
    r = client.get("/api/tokens/5/uri", params={"resolver": "ar", "base": "x"})
    assert r.status_code == 400


def test_function_backed_resolver(client: TestClient, app_state: AppState) -> None:
    app_state.register_resolver("fn", CallableResolver(lambda token_id: f"https://r/{token_id * 2}"))
    assert client.get("/api/tokens/21/uri", params={"resolver": "fn"}).json()["uri"] == "https://r/42"
    assert "fn" in client.get("/api/registry/").json()["resolvers"]


def test_registry_summary_tracks_mutations(client: TestClient) -> None:
    _mint(client, ALICE)
    _mint(client, BOB)
    client.delete("/api/tokens/1", headers={"X-Caller": ALICE})
    body = client.get("/api/registry/").json()
    assert (body["next_id"], body["total_supply"]) == (3, 1)


def test_admin_endpoints(client: TestClient) -> None:
    _mint(client, ALICE)

    r = client.put("/api/admin/base-uri", json={"value": "https://m/"}, headers={"X-Caller": ALICE})
    assert r.status_code == 403
    assert client.get("/api/registry/").json()["base_uri"] == ""

    r = client.put("/api/admin/base-uri", json={"value": "https://m/"}, headers={"X-Caller": ADMIN})
    assert r.json() == {"base_uri": "https://m/"}
    r = client.put("/api/admin/base-extension", json={"value": ".md"}, headers={"X-Caller": ADMIN})
    assert r.json() == {"base_extension": ".md"}
    assert client.get("/api/tokens/1/uri").json()["uri"] == "https://m/eip155:1/1.md"

    r = client.put("/api/admin/administrator", json={"new_admin": BOB}, headers={"X-Caller": ADMIN})
    assert r.json() == {"administrator": BOB}
    r = client.put("/api/admin/base-uri", json={"value": "x"}, headers={"X-Caller": ADMIN})
    assert r.status_code == 403


def test_metadata_refresh_and_event_feed(client: TestClient) -> None:
    _mint(client, ALICE, initial_data="seed")
    assert client.post("/api/metadata/refresh", json={"id": 1}).json() == {"ok": True}
    r = client.post("/api/metadata/refresh-batch", json={"from_id": 1, "to_id": 10})
    assert r.json() == {"ok": True}

    events = client.get("/api/metadata/events").json()
    assert [e["event"] for e in events] == [
        "Transfer",
        "Minted",
        "MetadataUpdate",
        "BatchMetadataUpdate",
    ]
    assert events[1] == {"event": "Minted", "id": 1, "data": "seed"}
    assert events[3] == {"event": "BatchMetadataUpdate", "from_id": 1, "to_id": 10}

    last = client.get("/api/metadata/events", params={"limit": 1}).json()
    assert [e["event"] for e in last] == ["BatchMetadataUpdate"]
