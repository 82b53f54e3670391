from __future__ import annotations

from typing import Any, Dict, List

import pytest
from typer.testing import CliRunner

from cli.app import app
from cli.config import DEFAULT_BASE_URL, load_config


def _toggles(pump: bool = True, auto: bool = True) -> Dict[str, Any]:
    return {
        "relays": [
            {"name": "pump", "title": "PUMP", "energized": pump, "hint": "Active and within limits"},
            {"name": "fan", "title": "FAN", "energized": False, "hint": "Standby - tap to arm"},
        ],
        "mode": {"auto": auto, "label": "Auto" if auto else "Manual"},
    }


class StubClient:
    def __init__(self, config) -> None:
        self.config = config
        self.flipped: List[str] = []
        self.mode_flips = 0
        self.trend_payload: Dict[str, Any] = {
            "bars": [
                {"value": 12.1, "height": 85.75, "label": "T1"},
                {"value": 12.7, "height": 90.0, "label": "T2"},
            ],
            "peak": 12.7,
            "caption": "12.7 V peak",
        }
        self.closed = False

    def get_dashboard(self) -> Dict[str, Any]:
        return {
            "title": "expoTestApp",
            "deck_name": "Control Deck",
            "hero": [{"label": "Runtime", "value": "6h 21m"}],
            "sensors": [{"label": "Voltage", "value": "12.4 V", "detail": "Charging", "accent": "#22c55e"}],
            "trend": self.trend_payload,
            "toggles": _toggles(),
            "activity": [{"label": "Pump primed", "time": "2m ago", "tone": "#0ea5e9"}],
        }

    def get_trend(self) -> Dict[str, Any]:
        return self.trend_payload

    def get_toggles(self) -> Dict[str, Any]:
        return _toggles()

    def flip_relay(self, key: str) -> Dict[str, Any]:
        self.flipped.append(key)
        return _toggles(pump=False)

    def flip_mode(self) -> Dict[str, Any]:
        self.mode_flips += 1
        return _toggles(auto=False)

    def close(self) -> None:
        self.closed = True


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def stub(monkeypatch) -> Dict[str, StubClient]:
    holder: Dict[str, StubClient] = {}

    def factory(config):
        holder["stub"] = StubClient(config)
        return holder["stub"]

    monkeypatch.setattr("cli.app.ApiClient", factory)
    return holder


def test_show_renders_dashboard(stub, runner: CliRunner) -> None:
    result = runner.invoke(app, ["show"])

    assert result.exit_code == 0
    assert "Control Deck" in result.stdout
    assert "Runtime: 6h 21m" in result.stdout
    assert "12.7 V peak" in result.stdout
    assert "PUMP: ON" in result.stdout
    assert "Pump primed" in result.stdout
    assert stub["stub"].closed is True


def test_trend_command(stub, runner: CliRunner) -> None:
    result = runner.invoke(app, ["trend"])

    assert result.exit_code == 0
    assert "T2: 12.7 V (height 90.00)" in result.stdout


def test_flip_relay_command(stub, runner: CliRunner) -> None:
    result = runner.invoke(app, ["--base-url", "http://deck:9000/", "flip-relay", "pump"])

    assert result.exit_code == 0
    assert "Relay pump flipped." in result.stdout
    assert "PUMP: OFF" in result.stdout
    assert stub["stub"].flipped == ["pump"]
    assert stub["stub"].config.base_url == "http://deck:9000"


def test_flip_mode_command(stub, runner: CliRunner) -> None:
    result = runner.invoke(app, ["flip-mode"])

    assert result.exit_code == 0
    assert "Mode is now Manual." in result.stdout
    assert stub["stub"].mode_flips == 1


def test_load_config_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("API_BASE_URL", "http://env-host:8001/")
    monkeypatch.setenv("CLI_HTTP_TIMEOUT", "not-a-number")

    config = load_config()

    assert config.base_url == "http://env-host:8001"
    assert config.timeout == 10.0

    monkeypatch.delenv("API_BASE_URL")
    assert load_config(timeout=2.5) == load_config(base_url=DEFAULT_BASE_URL, timeout=2.5)
