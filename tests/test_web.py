from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from app import api, web
from app.main import create_app
from datastore.toggle_store import ToggleStore
from models.fixtures import DeckFixtures
from services.dashboard import DashboardService
from services.trend import TrendNormalizer


@pytest.fixture
def dashboard() -> DashboardService:
    fixtures = DeckFixtures()
    return DashboardService(
        fixtures=fixtures,
        store=ToggleStore.from_fixtures(fixtures),
        normalizer=TrendNormalizer(),
        title="Deck Page",
    )


@pytest.fixture
def ui_client(dashboard: DashboardService) -> Iterator[TestClient]:
    app = create_app()
    app.dependency_overrides[api.get_dashboard] = lambda: dashboard
    app.dependency_overrides[web.get_dashboard] = lambda: dashboard
    with TestClient(app) as client:
        yield client


def test_ui_index_renders_every_section(ui_client: TestClient) -> None:
    response = ui_client.get("/ui")

    assert response.status_code == 200
    body = response.text
    assert "<title>Deck Page</title>" in body
    assert "Control Deck" in body
    assert "Temperature" in body
    assert "12.7 V peak" in body
    assert "height: 90.0px" in body
    assert body.count('class="bar-label"') == 7
    assert "PUMP" in body
    assert "Active and within limits" in body
    assert ">Auto<" in body
    assert "Firmware ping OK" in body
    assert "/static/dashboard.css" in body


def test_relay_tap_redirects_and_rerenders(ui_client: TestClient, dashboard: DashboardService) -> None:
    response = ui_client.post("/ui/relays/fan", follow_redirects=False)

    assert response.status_code == 303
    assert response.headers["location"].endswith("/ui")
    assert dashboard.store.state.relays["fan"] is True

    page = ui_client.post("/ui/relays/fan")
    assert page.status_code == 200
    assert dashboard.store.state.relays["fan"] is False


def test_mode_tap_switches_label(ui_client: TestClient) -> None:
    page = ui_client.post("/ui/mode")

    assert page.status_code == 200
    assert ">Manual<" in page.text


def test_unknown_relay_tap_returns_not_found(ui_client: TestClient) -> None:
    response = ui_client.post("/ui/relays/unknown", follow_redirects=False)

    assert response.status_code == 404


def test_stylesheet_is_served(ui_client: TestClient) -> None:
    response = ui_client.get("/static/dashboard.css")

    assert response.status_code == 200
    assert ".hero-card" in response.text
