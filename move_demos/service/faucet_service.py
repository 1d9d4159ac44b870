# move_demos/service/faucet_service.py
"""
Faucet funding for test accounts.
"""

import asyncio
from typing import Iterable, List, Optional

from aptos_sdk.account_address import AccountAddress
from aptos_sdk.async_client import FaucetClient, RestClient

from ..config.settings import settings, logger
from ..core.datatypes import normalize_address


def create_faucet(rest_client: RestClient, faucet_url: Optional[str] = None) -> FaucetClient:
    return FaucetClient(faucet_url or settings.APTOS_FAUCET_URL, rest_client)


async def fund_accounts(
    faucet: FaucetClient,
    addresses: Iterable,
    amount: int,
    rounds: int = 1,
) -> int:
    """
    Funds every address `2 * rounds` times.

    Each round first funds all addresses concurrently, then once more one
    after another. Any faucet error propagates and stops the remaining rounds.

    Args:
        faucet (FaucetClient): The faucet client
        addresses (Iterable): Addresses to fund
        amount (int): Octas per funding request
        rounds (int): Number of rounds

    Returns:
        int: The number of funding requests made.
    """
    targets: List[AccountAddress] = [
        AccountAddress.from_str(normalize_address(addr)) for addr in addresses
    ]
    requests = 0
    for round_no in range(rounds):
        logger.debug(f"Faucet round {round_no + 1}/{rounds}")
        await asyncio.gather(*(faucet.fund_account(addr, amount) for addr in targets))
        requests += len(targets)
        for addr in targets:
            await faucet.fund_account(addr, amount)
            requests += 1
    logger.info(f"Funded {len(targets)} accounts with {requests} faucet requests of {amount} octas")
    return requests
