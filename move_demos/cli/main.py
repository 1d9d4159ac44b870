# move_demos/cli/main.py

import click
from rich.console import Console

from move_demos import __version__
from move_demos.config.settings import settings

from .coin_cli import coin_cli
from .faucet_cli import faucet_cli
from .market_cli import market_cli
from .query_cli import query_cli
from .store_cli import store_cli


@click.group()
def movedemo():
    """
    Aptos Move demo scripts: tokens, marketplace, coins and stores.
    """
    pass


@movedemo.command("version")
def version_cmd():
    """Show version and the configured network."""
    console = Console()
    console.print(f"[bold cyan]move-demos[/] {__version__}")
    console.print(f"Node:   [blue]{settings.APTOS_NODE_URL}[/blue]")
    console.print(f"Faucet: [blue]{settings.APTOS_FAUCET_URL}[/blue]")


movedemo.add_command(market_cli, name="market")
movedemo.add_command(coin_cli, name="coin")
movedemo.add_command(store_cli, name="store")
movedemo.add_command(faucet_cli, name="faucet")
movedemo.add_command(query_cli, name="query")


def main():
    movedemo()


if __name__ == "__main__":
    main()
