from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import typer

from cli.client import ApiClient
from cli.config import CLIConfig, load_config
from cli.render import render_dashboard, render_toggles, render_trend


@dataclass
class CLIState:
    config: CLIConfig
    client: ApiClient


app = typer.Typer(
    help="Utilities for interacting with the control deck service.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        raise typer.Exit(code=1)
    return state


@app.callback()
def main(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url",
        "-b",
        help="Deck API base URL (defaults to API_BASE_URL env or http://localhost:8000).",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="Seconds to wait for each HTTP request.",
    ),
) -> None:
    """Entry point for the CLI."""
    config = load_config(base_url=base_url, timeout=timeout)
    client = ApiClient(config)
    ctx.obj = CLIState(config=config, client=client)
    ctx.call_on_close(client.close)


@app.command("show")
def show_command(ctx: typer.Context) -> None:
    """Print the whole dashboard."""
    state = _get_state(ctx)
    render_dashboard(state.client.get_dashboard())


@app.command("trend")
def trend_command(ctx: typer.Context) -> None:
    """Print the normalized voltage trend."""
    state = _get_state(ctx)
    render_trend(state.client.get_trend())


@app.command("relays")
def relays_command(ctx: typer.Context) -> None:
    """Print relay flags and the current mode."""
    state = _get_state(ctx)
    render_toggles(state.client.get_toggles())


@app.command("flip-relay")
def flip_relay_command(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Relay name, e.g. pump."),
) -> None:
    """Toggle a single relay."""
    state = _get_state(ctx)
    payload = state.client.flip_relay(key)
    typer.secho(f"Relay {key} flipped.", fg=typer.colors.GREEN)
    render_toggles(payload)


@app.command("flip-mode")
def flip_mode_command(ctx: typer.Context) -> None:
    """Switch between Auto and Manual mode."""
    state = _get_state(ctx)
    payload = state.client.flip_mode()
    typer.secho(f"Mode is now {payload['mode']['label']}.", fg=typer.colors.GREEN)
    render_toggles(payload)
