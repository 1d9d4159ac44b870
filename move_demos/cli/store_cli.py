# move_demos/cli/store_cli.py

import click

from ..config.settings import settings
from ..flows.coin_flow import run_store_admin, run_store_user
from ..service.store_service import StoreClient
from .coin_cli import alice_and_bob
from .utils import console, run_async


@click.group()
def store_cli():
    """
    🗄️ Commands for the admin and user store modules.
    """
    pass


@store_cli.command("admin")
def admin_cmd():
    """Alice stores a value, then passes the admin role to Bob and back."""

    async def _run():
        alice, bob = alice_and_bob()
        client = StoreClient(settings.APTOS_NODE_URL)
        try:
            hashes = await run_store_admin(client, alice, bob)
        finally:
            await client.close()
        for txn_hash in hashes:
            console.print(f"[yellow]{txn_hash}[/yellow]")

    run_async(_run())


@store_cli.command("user")
@click.option("--sequential", is_flag=True, help="Submit one account after the other.")
def user_cmd(sequential):
    """Alice and Bob each store the current time in Alice's user store."""

    async def _run():
        alice, bob = alice_and_bob()
        client = StoreClient(settings.APTOS_NODE_URL)
        try:
            hashes = await run_store_user(client, alice, [alice, bob], concurrent=not sequential)
        finally:
            await client.close()
        console.print(f"[green]✅ {len(hashes)} user_store transactions committed[/green]")

    run_async(_run())
