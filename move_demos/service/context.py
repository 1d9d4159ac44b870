# move_demos/service/context.py

import random
from dataclasses import dataclass
from typing import Optional

from aptos_sdk.account import Account
from aptos_sdk.async_client import FaucetClient

from ..config.settings import Settings, settings as default_settings, logger
from ..core.account import load_account, pick_trading_pair, account_hex
from ..core.client import DemoClient
from .faucet_service import create_faucet


@dataclass
class DemoContext:
    """Client, faucet and role accounts one demo run works with."""
    client: DemoClient
    faucet: FaucetClient
    dev: Account
    seller: Account
    buyer: Account

    async def close(self):
        await self.client.close()


def get_demo_context(
    settings: Optional[Settings] = None,
    client: Optional[DemoClient] = None,
    random_pair: bool = False,
    rng: Optional[random.Random] = None,
) -> DemoContext:
    """
    Builds the demo context from settings.

    Args:
        settings (Settings, optional): Settings to read, the global ones by default.
        client (DemoClient, optional): Client to reuse; a new one is created otherwise.
        random_pair (bool): Pick seller and buyer from the demo wallet pool
            instead of SELLER_PRIVATE_KEY / BUYER_PRIVATE_KEY.
        rng (random.Random, optional): Randomness source for the pick.

    Returns:
        DemoContext: The assembled context.
    """
    settings = settings or default_settings

    if random_pair:
        seller_key, buyer_key = pick_trading_pair(rng=rng)
    else:
        seller_key, buyer_key = settings.SELLER_PRIVATE_KEY, settings.BUYER_PRIVATE_KEY

    # Keys are loaded first so a malformed key never leaves a client open
    dev = load_account(settings.DEV_PRIVATE_KEY, "dev")
    seller = load_account(seller_key, "seller")
    buyer = load_account(buyer_key, "buyer")

    client = client or DemoClient(settings.APTOS_NODE_URL)
    context = DemoContext(
        client=client,
        faucet=create_faucet(client, settings.APTOS_FAUCET_URL),
        dev=dev,
        seller=seller,
        buyer=buyer,
    )
    logger.info(f"Connected to {settings.APTOS_NODE_URL} as dev {account_hex(context.dev)}")
    return context
