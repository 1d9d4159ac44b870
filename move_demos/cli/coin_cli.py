# move_demos/cli/coin_cli.py
"""
Commands for the managed coin demos.
"""

import click

from ..config.settings import settings
from ..core.account import load_account
from ..flows.coin_flow import MINT_AMOUNT, run_creator_coin, run_sample_coin
from ..service.coin_service import CoinClient
from .utils import console, run_async


def alice_and_bob():
    return (
        load_account(settings.PRIVATE_KEY_ALICE, "alice"),
        load_account(settings.PRIVATE_KEY_BOB, "bob"),
    )


@click.group()
def coin_cli():
    """
    🪙 Commands for creating, registering and minting coins.
    """
    pass


@coin_cli.command("create")
@click.option("--name", default="TokenName01", show_default=True)
@click.option("--symbol", default="TN01", show_default=True)
@click.option("--supply", default=MINT_AMOUNT, show_default=True, type=int)
@click.option("--module", default=None, help="Creator coin module (default: CREATOR_COIN_MODULE).")
def create_cmd(name, symbol, supply, module):
    """Alice creates a new coin through the creator coin module."""

    async def _run():
        alice, _ = alice_and_bob()
        client = CoinClient(settings.APTOS_NODE_URL)
        try:
            if module:
                txn_hash = await client.create_coin(alice, alice, name, symbol, supply, module_name=module)
                await client.wait_for_transaction(txn_hash)
            else:
                txn_hash = await run_creator_coin(client, alice, name, symbol, supply)
        finally:
            await client.close()
        console.print(f"[green]✅ Coin {symbol} created:[/green] [yellow]{txn_hash}[/yellow]")

    run_async(_run())


@coin_cli.command("sample")
@click.option("--amount", default=MINT_AMOUNT, show_default=True, type=int, help="Amount Alice mints to Bob.")
def sample_cmd(amount):
    """Bob registers Alice's coin if needed and Alice mints some to him."""

    async def _run():
        alice, bob = alice_and_bob()
        client = CoinClient(settings.APTOS_NODE_URL)
        try:
            balances = await run_sample_coin(client, alice, bob, amount)
        finally:
            await client.close()
        console.print(
            f"[green]✅ Bob's balance: {balances['initial']} → {balances['updated']}[/green]"
        )

    run_async(_run())
