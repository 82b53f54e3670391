from __future__ import annotations

from typing import Any, Dict, Iterable

import typer


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def echo_key_values(pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        typer.echo(f"{key}: {value}")


def render_trend(payload: Dict[str, Any]) -> None:
    echo_heading("Power trend")
    for bar in payload.get("bars") or []:
        typer.echo(f"  {bar.get('label')}: {bar.get('value')} V (height {bar.get('height'):.2f})")
    typer.echo(payload.get("caption", ""))


def render_toggles(payload: Dict[str, Any]) -> None:
    mode = payload.get("mode") or {}
    echo_heading("Relays and modes")
    typer.echo(f"mode: {mode.get('label')}")
    for relay in payload.get("relays") or []:
        state = "ON" if relay.get("energized") else "OFF"
        colour = typer.colors.GREEN if relay.get("energized") else typer.colors.YELLOW
        typer.secho(f"  - {relay.get('title')}: {state} ({relay.get('hint')})", fg=colour)


def render_dashboard(payload: Dict[str, Any]) -> None:
    echo_heading(payload.get("deck_name") or "Control Deck")
    echo_key_values((stat.get("label"), stat.get("value")) for stat in payload.get("hero") or [])

    typer.echo()
    echo_heading("Sensors")
    for card in payload.get("sensors") or []:
        typer.echo(f"  - {card.get('label')}: {card.get('value')} ({card.get('detail')})")

    typer.echo()
    render_trend(payload.get("trend") or {})

    typer.echo()
    render_toggles(payload.get("toggles") or {})

    typer.echo()
    echo_heading("Recent activity")
    activity = payload.get("activity") or []
    if activity:
        for entry in activity:
            typer.echo(f"  - {entry.get('label')} ({entry.get('time')})")
    else:
        typer.echo("No activity logged.")
