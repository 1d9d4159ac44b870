# move_demos/cli/market_cli.py
"""
Marketplace commands: the full demo and single listing actions.
"""

import random

import click
from rich.table import Table

from ..config.settings import settings
from ..core.account import account_hex
from ..core.datatypes import TokenDataId
from ..flows.marketplace_flow import (
    COLLECTION_NAME,
    DEMO_STEPS,
    FUND_STEPS,
    MarketplaceDemo,
    REPORT_STEPS,
    SETUP_STEPS,
)
from ..service.context import get_demo_context
from ..service.market_service import Marketplace, MarketplaceClient
from .utils import console, run_async


def _marketplace(context, market_address, module):
    return Marketplace(market_address or account_hex(context.dev), module or settings.MARKET_MODULE)


@click.group()
def market_cli():
    """
    🛒 Commands for the NFT marketplace module.
    """
    pass


@market_cli.command("demo")
@click.option("--report", is_flag=True, help="Print addresses and balances between steps.")
@click.option("--setup", is_flag=True, help="Create the collection and initialise the market first.")
@click.option("--fund", is_flag=True, help="Fund dev, seller and buyer from the faucet first.")
@click.option("--module", default=None, help="Marketplace module name (default: MARKET_MODULE).")
@click.option("--market-address", default=None, help="Address the module is deployed at (default: dev).")
@click.option("--collection", default=COLLECTION_NAME, show_default=True, help="Collection name.")
@click.option("--property-version", default=0, show_default=True, type=int)
@click.option("--seed", default=None, type=int, help="Seed for token number, prices and wallet pick.")
@click.option("--random-pair", is_flag=True, help="Pick seller and buyer from the demo wallet pool.")
def demo_cmd(report, setup, fund, module, market_address, collection, property_version, seed, random_pair):
    """
    🎬 Mint a token, then list, delist, relist, re-price and buy it.
    """
    rng = random.Random(seed)
    steps = []
    if fund:
        steps.extend(FUND_STEPS)
    if setup:
        steps.extend(SETUP_STEPS)
    steps.extend(REPORT_STEPS if report else DEMO_STEPS)

    async def _run():
        context = get_demo_context(random_pair=random_pair, rng=rng)
        try:
            demo = MarketplaceDemo(
                context.client,
                context.dev,
                context.seller,
                context.buyer,
                _marketplace(context, market_address, module),
                faucet=context.faucet,
                collection_name=collection,
                property_version=property_version,
                rng=rng,
            )
            completed = await demo.run(steps)
        finally:
            await context.close()
        console.print(f"[green]✅ {demo.token_name}: {len(completed)} steps completed[/green]")

    run_async(_run())


def _action_options(func):
    options = [
        click.option("--module", default=None, help="Marketplace module name (default: MARKET_MODULE)."),
        click.option("--market-address", default=None, help="Address the module is deployed at (default: dev)."),
        click.option("--creator", default=None, help="Token creator address (default: dev)."),
        click.option("--collection", default=COLLECTION_NAME, show_default=True),
        click.option("--name", "token_name", required=True, help="Token name."),
        click.option("--property-version", default=1, show_default=True, type=int),
    ]
    for option in reversed(options):
        func = option(func)
    return func


async def _submit_action(module, market_address, creator, collection, token_name, property_version, action):
    context = get_demo_context()
    try:
        market = MarketplaceClient(
            context.client, _marketplace(context, market_address, module), property_version
        )
        token = TokenDataId(creator or account_hex(context.dev), collection, token_name)
        txn_hash = await action(context, market, token)
    finally:
        await context.close()
    console.print(f"[green]✅ Committed:[/green] [yellow]{txn_hash}[/yellow]")


@market_cli.command("list")
@_action_options
@click.option("--price", required=True, type=int, help="Price per token in octas.")
def list_cmd(module, market_address, creator, collection, token_name, property_version, price):
    """🏷️ Seller lists a token."""
    run_async(
        _submit_action(
            module, market_address, creator, collection, token_name, property_version,
            lambda ctx, market, token: market.list_nft(ctx.seller, token, price),
        )
    )


@market_cli.command("delist")
@_action_options
def delist_cmd(module, market_address, creator, collection, token_name, property_version):
    """🚫 Seller cancels a listing."""
    run_async(
        _submit_action(
            module, market_address, creator, collection, token_name, property_version,
            lambda ctx, market, token: market.delist_nft(ctx.seller, token),
        )
    )


@market_cli.command("update-price")
@_action_options
@click.option("--price", required=True, type=int, help="New price per token in octas.")
def update_price_cmd(module, market_address, creator, collection, token_name, property_version, price):
    """💱 Seller changes the price of a listing."""
    run_async(
        _submit_action(
            module, market_address, creator, collection, token_name, property_version,
            lambda ctx, market, token: market.update_nft_price(ctx.seller, token, price),
        )
    )


@market_cli.command("buy")
@_action_options
def buy_cmd(module, market_address, creator, collection, token_name, property_version):
    """🛍️ Buyer buys the seller's listing."""
    run_async(
        _submit_action(
            module, market_address, creator, collection, token_name, property_version,
            lambda ctx, market, token: market.buy_nft(ctx.buyer, account_hex(ctx.seller), token),
        )
    )


@market_cli.command("init")
@click.option("--module", default=None, help="Marketplace module name (default: MARKET_MODULE).")
@click.option("--fee", "fee_percentage", default=10, show_default=True, type=int)
def init_cmd(module, fee_percentage):
    """
    🏗️ Initialise the market with dev as admin and whitelist APT.
    """

    async def _run():
        context = get_demo_context()
        try:
            market = MarketplaceClient(context.client, _marketplace(context, None, module))
            hashes = await market.initialize_market(context.dev, fee_percentage)
        finally:
            await context.close()

        table = Table(title="Marketplace initialised")
        table.add_column("Step", style="cyan")
        table.add_column("Transaction", style="yellow")
        for step, txn_hash in zip(("initialize_market", "add_coin_type_to_whitelist"), hashes):
            table.add_row(step, txn_hash)
        console.print(table)

    run_async(_run())
