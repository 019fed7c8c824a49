"""CLI: playstore auth login|status|logout"""

from typing import Optional

import click
from rich.console import Console

from playstore_api.errors import PlayStoreError

console = Console()


def _load_config() -> dict:
    from playstore_api.cli.main import _load_config
    return _load_config()


def _save_config(cfg: dict) -> None:
    from playstore_api.cli.main import _save_config
    _save_config(cfg)


@click.group()
def auth():
    """Authentication commands."""


@auth.command("login")
@click.option("--locale", default=None, help="Locale such as en_US")
@click.option("--device", "device_file", default=None, type=click.Path(exists=True, dir_okay=False),
              help="Device .properties file")
def auth_login(locale: Optional[str], device_file: Optional[str]):
    """Check the device in and log in with email and password."""
    from playstore_api.cli.main import _make_client

    cfg = _load_config()
    if locale:
        cfg["locale"] = locale
    if device_file:
        cfg["device_file"] = device_file

    email = click.prompt("Email")
    password = click.prompt("Password", hide_input=True)
    with _make_client(cfg, with_credentials=False) as client:
        try:
            with console.status("Checking in and logging in..."):
                result = client.login(email, password)
        except PlayStoreError as e:
            console.print(f"[red]{e}[/red]")
            raise SystemExit(1)
    console.print(f"[green]Logged in as {email} (GSF id: {result['gsf_id']})[/green]")

    _save_config({**cfg, "token": result["token"], "gsf_id": result["gsf_id"], "email": email})
    console.print("[dim]Token saved to ~/.playstore/config.json[/dim]")


@auth.command("status")
def auth_status():
    """Show current auth status."""
    cfg = _load_config()
    if cfg.get("token"):
        console.print(f"[green]Logged in[/green] as {cfg.get('email', 'unknown')} (GSF id: {cfg.get('gsf_id')})")
    else:
        console.print("[yellow]Not logged in. Run `playstore auth login`.[/yellow]")


@auth.command("logout")
def auth_logout():
    """Clear saved credentials."""
    cfg = _load_config()
    for key in ("token", "gsf_id", "email"):
        cfg.pop(key, None)
    _save_config(cfg)
    console.print("[green]Logged out.[/green]")
