"""FastAPI app: routing, envelopes, middleware and error mapping."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any
from unittest.mock import MagicMock

import pytest
from catalog_api.app import create_app
from catalog_api.artists.repository import ArtistRepository
from catalog_api.artists.service import ArtistService, default_artist_service
from catalog_api.genres.repository import GenreRepository
from catalog_api.genres.service import GenreService, default_genre_service
from conftest import TABLE_NAME, TENANT_ID
from fastapi.testclient import TestClient

HEADERS = {"x-tenant-id": TENANT_ID}


@pytest.fixture
def client(dynamodb: Any, fixed_clock: Any) -> Iterator[TestClient]:
    app = create_app()
    genres = GenreService(
        GenreRepository(table_name=TABLE_NAME, dynamodb_resource=dynamodb, clock=fixed_clock)
    )
    artists = ArtistService(
        ArtistRepository(table_name=TABLE_NAME, dynamodb_resource=dynamodb, clock=fixed_clock)
    )
    app.dependency_overrides[default_genre_service] = lambda: genres
    app.dependency_overrides[default_artist_service] = lambda: artists
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


def test_health(client: TestClient) -> None:
    response = client.get("/health")
    body = response.json()
    assert response.status_code == 200
    assert body["status"] == "ok"
    assert body["service"] == "catalog-api"
    assert isinstance(body["timestamp"], int)
    assert body["uptime"] >= 0


def test_genre_crud_flow(client: TestClient) -> None:
    created = client.post(
        "/api/v1/genres",
        json={"id": "Drama", "texts": {"en": "Drama"}, "displayOrder": 1},
        headers=HEADERS,
    )
    assert created.status_code == 201
    assert created.json()["data"]["id"] == "drama"

    fetched = client.get("/api/v1/genres/drama", headers=HEADERS)
    assert fetched.json()["code"] == 1002

    updated = client.patch(
        "/api/v1/genres/drama", json={"texts": {"tr": "Dram"}}, headers=HEADERS
    )
    assert updated.json()["data"]["texts"] == {"tr": "Dram"}

    listed = client.get("/api/v1/genres", params={"limit": 10}, headers=HEADERS)
    assert [g["id"] for g in listed.json()["data"]["items"]] == ["drama"]
    assert listed.json()["data"]["nextCursor"] is None

    deleted = client.delete("/api/v1/genres/drama", headers=HEADERS)
    assert deleted.status_code == 200
    assert deleted.json()["data"] == {"id": "drama"}

    assert client.get("/api/v1/genres/drama", headers=HEADERS).status_code == 404


def test_artist_crud_flow(client: TestClient) -> None:
    created = client.post(
        "/api/v1/artists",
        json={"id": "AlPacino", "firstName": "Al", "lastName": "Pacino"},
        headers=HEADERS,
    )
    assert created.status_code == 201

    updated = client.put(
        "/api/v1/artists/AlPacino", json={"isActive": False}, headers=HEADERS
    )
    assert updated.json()["code"] == 1104

    listed = client.get("/api/v1/artists", params={"isActive": "false"}, headers=HEADERS)
    assert [a["id"] for a in listed.json()["data"]["items"]] == ["AlPacino"]

    deleted = client.delete("/api/v1/artists/AlPacino", headers=HEADERS)
    assert deleted.json()["code"] == 1105


def test_request_id_is_generated_and_echoed(client: TestClient) -> None:
    response = client.get("/api/v1/genres", headers=HEADERS)
    request_id = response.headers["X-Request-Id"]
    assert request_id
    assert response.json()["requestId"] == request_id


def test_inbound_request_id_is_kept(client: TestClient) -> None:
    response = client.get("/api/v1/genres", headers={**HEADERS, "X-Request-Id": "abc-123"})
    assert response.headers["X-Request-Id"] == "abc-123"
    assert response.json()["requestId"] == "abc-123"


def test_missing_tenant(client: TestClient) -> None:
    response = client.get("/api/v1/artists")
    body = response.json()
    assert response.status_code == 400
    assert body["code"] == 3003
    assert body["details"] == {"header": "x-tenant-id"}


def test_invalid_json(client: TestClient) -> None:
    response = client.post(
        "/api/v1/genres",
        content=b"{not json",
        headers={**HEADERS, "content-type": "application/json", "x-culture": "tr-TR"},
    )
    body = response.json()
    assert response.status_code == 400
    assert body["code"] == 3002
    assert body["locale"] == "tr-TR"


def test_validation_error(client: TestClient) -> None:
    response = client.post("/api/v1/artists", json={"id": "x y"}, headers=HEADERS)
    assert response.status_code == 400
    assert response.json()["details"] == {
        "message": "id may include letters, numbers, underscores, or hyphens"
    }


def test_conflict(client: TestClient) -> None:
    payload = {"id": "rock", "texts": {"en": "Rock"}, "displayOrder": 1}
    client.post("/api/v1/genres", json=payload, headers=HEADERS)
    response = client.post("/api/v1/genres", json=payload, headers=HEADERS)
    assert response.status_code == 409
    assert response.json()["code"] == 3409


def test_unknown_route(client: TestClient) -> None:
    response = client.get("/api/v1/albums", headers={"x-culture": "tr-TR"})
    body = response.json()
    assert response.status_code == 404
    assert body["code"] == 3001
    assert body["message"] == "İstenen adres bulunamadı."
    assert body["details"] == {"path": "/api/v1/albums"}


def test_unexpected_error_is_500_envelope(dynamodb: Any) -> None:
    app = create_app()
    broken = MagicMock()
    broken.list_genres.side_effect = RuntimeError("secret detail")
    app.dependency_overrides[default_genre_service] = lambda: broken

    with TestClient(app) as test_client:
        response = test_client.get(
            "/api/v1/genres",
            headers={**HEADERS, "X-Request-Id": "rid-42", "Origin": "https://app.example.com"},
        )

    assert response.status_code == 500
    body = response.json()
    assert body["code"] == 9999
    assert body["classId"] == "Unknown"
    assert body["requestId"] == "rid-42"
    assert "secret detail" not in response.text
    assert response.headers["X-Request-Id"] == "rid-42"
    assert "access-control-allow-origin" in response.headers


def test_cors_preflight(client: TestClient) -> None:
    response = client.options(
        "/api/v1/genres",
        headers={
            "Origin": "https://app.example.com",
            "Access-Control-Request-Method": "POST",
            "Access-Control-Request-Headers": "x-tenant-id,x-culture",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] in {"https://app.example.com", "*"}


def test_custom_api_root(monkeypatch: pytest.MonkeyPatch, dynamodb: Any) -> None:
    monkeypatch.setenv("API_ROOT", "catalog/")
    app = create_app()
    app.dependency_overrides[default_genre_service] = lambda: GenreService(
        GenreRepository(table_name=TABLE_NAME, dynamodb_resource=dynamodb)
    )
    with TestClient(app) as test_client:
        response = test_client.get("/catalog/genres", headers=HEADERS)
    assert response.status_code == 200
