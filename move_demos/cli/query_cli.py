# move_demos/cli/query_cli.py
"""
Command-line interface for querying account data.
"""

import click
from rich.table import Table

from ..core.client import create_client
from ..service.query_service import get_account_info
from .utils import console, run_async


@click.group()
def query_cli():
    """
    🔍 Commands for querying Aptos blockchain data.
    """
    pass


@query_cli.command("account")
@click.option("--address", required=True, help="Aptos account address to query.")
@click.option("--node-url", default=None, help="Custom Aptos node URL (uses APTOS_NODE_URL by default).")
def query_account_cmd(address, node_url):
    """
    📊 Show balance, sequence number and resource count of an account.
    """
    console.print(f"⏳ Querying account [blue]{address}[/blue]...")

    async def _run():
        client = create_client(node_url)
        try:
            info = await get_account_info(address, client)
        finally:
            await client.close()

        table = Table(title="Account")
        table.add_column("Field", style="cyan")
        table.add_column("Value", style="green")
        table.add_row("Address", info["address"])
        table.add_row("Balance (APT)", f"{info['balance_apt']:.8f}")
        table.add_row("Sequence number", str(info["sequence_number"]))
        table.add_row("Resources", str(info["resource_count"]))
        console.print(table)

    run_async(_run())
