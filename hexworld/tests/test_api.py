"""Tests for the HTTP interface."""

import tempfile
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from hexworld.api import INTERNAL_ERROR_BODY, create_app
from hexworld.schemas import HexCoord
from hexworld.storage import HexMap


@pytest.fixture
def hex_map():
    return HexMap(0)


@pytest.fixture
def ui_file():
    """Create a temporary UI page."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "ui.html"
        path.write_text("<html><body>hex ui</body></html>")
        yield path


@pytest.fixture
def client(hex_map, ui_file):
    with TestClient(create_app(hex_map, ui_path=ui_file)) as test_client:
        yield test_client


class TestLocationsEndpoint:
    def test_resolves_batch_in_order(self, client):
        response = client.post("/locations", json=[{"Q": 0, "R": 0}, {"Q": -1, "R": -1}])
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        assert response.json() == [
            {"Q": 0, "R": 0, "Shape": 0},
            {"Q": -1, "R": -1, "Shape": 2},
        ]

    def test_accepts_lowercase_names(self, client):
        response = client.post("/locations", json=[{"q": -1, "r": -1}])
        assert response.json() == [{"Q": -1, "R": -1, "Shape": 2}]

    def test_empty_batch(self, client):
        response = client.post("/locations", json=[])
        assert response.status_code == 200
        assert response.json() == []

    def test_populates_map(self, client, hex_map):
        client.post("/locations", json=[{"Q": 3, "R": 1}, {"Q": 3, "R": 1}, {"Q": 0, "R": 9}])
        assert len(hex_map) == 2
        assert HexCoord(q=3, r=1) in hex_map

    def test_repeat_requests_identical(self, client):
        body = [{"Q": q, "R": -q} for q in range(50)]
        first = client.post("/locations", json=body).json()
        second = client.post("/locations", json=body).json()
        assert first == second

    def test_malformed_json_is_server_error(self, client):
        response = client.post(
            "/locations",
            content=b"[{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 500
        assert response.text == INTERNAL_ERROR_BODY

    def test_wrong_shape_is_server_error(self, client):
        response = client.post("/locations", json={"Q": 0, "R": 0})
        assert response.status_code == 500
        assert response.text == INTERNAL_ERROR_BODY

    def test_string_coordinate_is_server_error(self, client):
        response = client.post("/locations", json=[{"Q": "1", "R": 0}])
        assert response.status_code == 500
        assert response.text == INTERNAL_ERROR_BODY

    def test_boolean_coordinate_is_server_error(self, client):
        response = client.post("/locations", json=[{"Q": True, "R": 0}])
        assert response.status_code == 500
        assert response.text == INTERNAL_ERROR_BODY

    def test_float_coordinate_is_server_error(self, client):
        response = client.post("/locations", json=[{"Q": 1.0, "R": 0}])
        assert response.status_code == 500
        assert response.text == INTERNAL_ERROR_BODY

    def test_out_of_range_coordinate_is_server_error(self, client):
        response = client.post("/locations", json=[{"Q": 2**31, "R": 0}])
        assert response.status_code == 500


class TestUiEndpoint:
    def test_serves_ui(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "hex ui" in response.text
        assert response.headers["content-type"].startswith("text/html")

    def test_missing_ui_file(self, hex_map):
        app = create_app(hex_map, ui_path=Path("/nonexistent/ui.html"))
        with TestClient(app) as client:
            assert client.get("/").status_code == 404

    def test_unknown_route(self, client):
        assert client.get("/nope").status_code == 404

    def test_bundled_ui_exists(self):
        from hexworld import config

        assert (config.WEB_DIR / "ui.html").is_file()
