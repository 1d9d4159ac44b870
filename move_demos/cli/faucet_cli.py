# move_demos/cli/faucet_cli.py

import click

from ..config.settings import settings
from ..core.client import create_client
from ..flows.coin_flow import FAUCET_AMOUNT, run_faucet
from ..service.faucet_service import create_faucet
from .coin_cli import alice_and_bob
from .utils import console, run_async


@click.group()
def faucet_cli():
    """
    🚰 Commands for funding test accounts.
    """
    pass


@faucet_cli.command("fund")
@click.option("--amount", default=FAUCET_AMOUNT, show_default=True, type=int, help="Octas per request.")
@click.option("--rounds", default=1, show_default=True, type=click.IntRange(min=1))
def fund_cmd(amount, rounds):
    """Fund Alice and Bob from the faucet."""

    async def _run():
        client = create_client()
        try:
            faucet = create_faucet(client, settings.APTOS_FAUCET_URL)
            requests = await run_faucet(faucet, alice_and_bob(), amount, rounds)
        finally:
            await client.close()
        console.print(f"[green]✅ {requests} faucet requests of {amount} octas[/green]")

    run_async(_run())
