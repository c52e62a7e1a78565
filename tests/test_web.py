"""Tests for the web interface."""

import base64

import httpx
import pytest
from fastapi.testclient import TestClient

from src.advisory import AdvisoryService, GeminiClient
from src.web import app as app_module


def _advisor(handler, api_key="test-key") -> AdvisoryService:
    async def no_sleep(delay):
        return None

    client = GeminiClient(
        api_key=api_key,
        base_url="https://example.test/v1beta",
        text_model="text-model",
        tts_model="tts-model",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        sleep=no_sleep,
    )
    return AdvisoryService(client)


@pytest.fixture
def client():
    with TestClient(app_module.app) as test_client:
        yield test_client


class TestPages:
    """HTML page rendering."""

    def test_index(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "Addis Taxi Route Finder" in response.text
        assert "Select start and end points" in response.text

    def test_index_amharic(self, client):
        response = client.get("/", params={"lang": "am"})
        assert response.status_code == 200
        assert "ታክሲ ተራ መፈለጊያ" in response.text
        assert "ቦሌ" in response.text

    def test_direct_result(self, client):
        response = client.get("/", params={"origin": "piazza", "destination": "ayer_tena"})
        assert "Direct Route" in response.text
        assert "Kazanchis" in response.text

    def test_form_transfer_result(self, client):
        response = client.post(
            "/", data={"origin": "stadium", "destination": "summit", "lang": "en"}
        )
        assert response.status_code == 200
        assert "One Transfer Required" in response.text
        assert "CMC - Michel" in response.text

    def test_form_not_found(self, client):
        response = client.post("/", data={"origin": "asco", "destination": "cmc", "lang": "am"})
        assert "ቀጥተኛ ወይም አንድ ጊዜ መቀየር የሚቻልበት መንገድ አልተገኘም።" in response.text

    def test_unknown_language_rejected(self, client):
        assert client.get("/", params={"lang": "fr"}).status_code == 422


class TestApi:
    """JSON endpoints."""

    def test_route_direct(self, client):
        response = client.get(
            "/api/route", params={"origin": "piazza", "destination": "ayer_tena"}
        )
        assert response.status_code == 200
        data = response.json()
        assert data["options"] == [
            {
                "kind": "direct",
                "routeName": "Piazza - Ayer Tena",
                "stops": ["Piazza", "Arat Kilo", "Megnagna", "Bole", "Kazanchis", "Ayer Tena"],
            }
        ]

    def test_route_transfer_amharic(self, client):
        data = client.get(
            "/api/route", params={"origin": "stadium", "destination": "summit", "lang": "am"}
        ).json()
        assert data["language"] == "am"
        assert {o["kind"] for o in data["options"]} == {"transfer"}
        assert data["options"][0]["transferStationName"] == "መገናኛ"

    def test_route_not_found(self, client):
        data = client.get("/api/route", params={"origin": "asco", "destination": "cmc"}).json()
        assert data["options"] == [{"kind": "not_found"}]

    def test_route_nothing_selected(self, client):
        data = client.get("/api/route", params={"origin": "piazza"}).json()
        assert data["options"] == []

    def test_stations(self, client):
        data = client.get("/api/stations", params={"lang": "am"}).json()
        assert len(data) == 26
        assert {"id": "bole", "name": "ቦሌ"} in data

    def test_station_search(self, client):
        data = client.get("/api/stations/search", params={"q": "Kazanchiz"}).json()
        assert data[0]["id"] == "kazanchis"

    def test_map(self, client):
        data = client.get("/api/map", params={"lang": "am"}).json()
        assert data["zoom"] == 13
        assert len(data["markers"]) == 26
        assert data["language"] == "am"
        assert data["nearestStation"] is not None

    def test_health(self, client):
        data = client.get("/health").json()
        assert data["status"] == "ok"
        assert data["network_loaded"]
        assert data["stations"] == 26
        assert data["map_mounted"]


class TestAdvisoryApi:
    """Advisory endpoints with a mocked generation service."""

    def test_unconfigured(self, client, monkeypatch):
        monkeypatch.setattr(app_module, "advisor", _advisor(lambda r: httpx.Response(200), api_key=""))
        response = client.post(
            "/api/advisory/fare", json={"origin": "bole", "destination": "stadium"}
        )
        assert response.status_code == 503

    def test_fare(self, client, monkeypatch):
        monkeypatch.setattr(
            app_module,
            "advisor",
            _advisor(
                lambda r: httpx.Response(
                    200, json={"candidates": [{"content": {"parts": [{"text": "10 Birr"}]}}]}
                )
            ),
        )
        response = client.post(
            "/api/advisory/fare", json={"origin": "bole", "destination": "stadium"}
        )
        assert response.status_code == 200
        assert response.json() == {"kind": "fare", "text": "10 Birr"}

    def test_unknown_kind(self, client, monkeypatch):
        monkeypatch.setattr(app_module, "advisor", _advisor(lambda r: httpx.Response(200)))
        response = client.post(
            "/api/advisory/weather", json={"origin": "bole", "destination": "stadium"}
        )
        assert response.status_code == 404

    def test_option_index_out_of_range(self, client, monkeypatch):
        monkeypatch.setattr(app_module, "advisor", _advisor(lambda r: httpx.Response(200)))
        response = client.post(
            "/api/advisory/status",
            json={"origin": "bole", "destination": "stadium", "option_index": 5},
        )
        assert response.status_code == 404

    def test_upstream_failure(self, client, monkeypatch):
        monkeypatch.setattr(app_module, "advisor", _advisor(lambda r: httpx.Response(429)))
        response = client.post(
            "/api/advisory/status", json={"origin": "bole", "destination": "stadium"}
        )
        assert response.status_code == 502
        assert "429" in response.json()["detail"]

    def test_speech(self, client, monkeypatch):
        pcm = b"\x00\x00" * 10
        monkeypatch.setattr(
            app_module,
            "advisor",
            _advisor(
                lambda r: httpx.Response(
                    200,
                    json={
                        "candidates": [
                            {
                                "content": {
                                    "parts": [
                                        {
                                            "inlineData": {
                                                "mimeType": "audio/L16;rate=24000",
                                                "data": base64.b64encode(pcm).decode(),
                                            }
                                        }
                                    ]
                                }
                            }
                        ]
                    },
                )
            ),
        )
        response = client.post("/api/speech", json={"text": "ሰላም"})
        assert response.status_code == 200
        assert response.headers["content-type"] == "audio/wav"
        assert response.content[:4] == b"RIFF"
