"""
Play Store CLI — `playstore` command.

Commands:
  playstore auth login             Checkin + login, saves token and GSF id
  playstore details <package>      App details
  playstore bulk-details <pkg>...  Details for several apps
  playstore suggest <query>        Search suggestions
  playstore reviews <package>      App reviews
  playstore categories [category]  Category tree
  playstore recommendations <pkg>  Related apps
  playstore delivery <pkg> <vc>    Download info for an owned app
"""

import json
import logging
from pathlib import Path
from typing import Any

try:
    import click
    from rich.console import Console
except ImportError:
    raise SystemExit("CLI requires extras: pip install playstore-api[cli]")

from google.protobuf.json_format import MessageToDict

from playstore_api.client import PlayStoreAPI
from playstore_api.device import DeviceProperties

console = Console()
CONFIG_FILE = Path.home() / ".playstore" / "config.json"


def _load_config() -> dict:
    try:
        return json.loads(CONFIG_FILE.read_text())
    except (FileNotFoundError, json.JSONDecodeError):
        return {}


def _save_config(cfg: dict) -> None:
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(json.dumps(cfg, indent=2))


def _make_client(cfg: dict, with_credentials: bool = True) -> PlayStoreAPI:
    device_file = cfg.get("device_file")
    device = DeviceProperties.from_file(device_file) if device_file else DeviceProperties()
    return PlayStoreAPI(
        device=device,
        locale=cfg.get("locale", "en_US"),
        token=cfg.get("token") if with_credentials else None,
        gsf_id=cfg.get("gsf_id") if with_credentials else None,
    )


def _get_client() -> PlayStoreAPI:
    cfg = _load_config()
    if not cfg.get("token") or not cfg.get("gsf_id"):
        console.print("[red]Not logged in. Run `playstore auth login` first.[/red]")
        raise SystemExit(1)
    return _make_client(cfg)


def _echo_json(message: Any) -> None:
    click.echo(json.dumps(MessageToDict(message), indent=2))


@click.group()
@click.version_option("0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Log requests to stderr")
def main(verbose: bool):
    """Play Store CLI — browse the store catalog from a terminal."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


# Register subcommands from separate modules
from playstore_api.cli.auth import auth
from playstore_api.cli.catalog import (
    bulk_details_cmd,
    categories_cmd,
    delivery_cmd,
    details_cmd,
    recommendations_cmd,
    reviews_cmd,
    suggest_cmd,
)

main.add_command(auth)
main.add_command(details_cmd)
main.add_command(bulk_details_cmd)
main.add_command(suggest_cmd)
main.add_command(reviews_cmd)
main.add_command(categories_cmd)
main.add_command(recommendations_cmd)
main.add_command(delivery_cmd)


if __name__ == "__main__":
    main()
