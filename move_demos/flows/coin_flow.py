# move_demos/flows/coin_flow.py
"""
Managed coin, store and faucet demo flows.
"""

import asyncio
import time
from typing import Dict, List, Optional, Sequence

from aptos_sdk.account import Account
from aptos_sdk.async_client import FaucetClient

from ..config.settings import logger
from ..core.account import account_hex
from ..service.coin_service import CoinClient
from ..service.faucet_service import fund_accounts
from ..service.store_service import StoreClient

MINT_AMOUNT = 10 * 10**8
FAUCET_AMOUNT = 1_000_000_000


def now_ms() -> int:
    return int(time.time() * 1000)


async def run_sample_coin(
    client: CoinClient, alice: Account, bob: Account, amount: int = MINT_AMOUNT
) -> Dict[str, int]:
    """
    Alice mints `amount` of her coin to Bob, registering Bob first if needed.

    Returns:
        Dict[str, int]: Bob's balance before and after the mint.
    """
    logger.info("=== Addresses ===")
    logger.info(f"Alice: {account_hex(alice)}")
    logger.info(f"Bob: {account_hex(bob)}")

    if not await client.is_registered(bob.address(), alice.address()):
        logger.info("Bob registers the newly created coin so he can receive it from Alice")
        txn_hash = await client.register_coin(alice.address(), bob)
        await client.wait_for_transaction(txn_hash)

    initial = await client.get_balance(bob.address(), alice.address())
    logger.info(f"Bob's initial Coin balance: {initial}.")

    logger.info("Alice mints Bob some of the new coin.")
    txn_hash = await client.mint_coin(alice, bob.address(), amount)
    await client.wait_for_transaction(txn_hash)

    updated = await client.get_balance(bob.address(), alice.address())
    logger.info(f"Bob's updated Coin balance: {updated}.")
    return {"initial": initial, "updated": updated}


async def run_creator_coin(
    client: CoinClient,
    alice: Account,
    name: str = "TokenName01",
    symbol: str = "TN01",
    supply: int = MINT_AMOUNT,
) -> str:
    txn_hash = await client.create_coin(alice, alice, name, symbol, supply)
    await client.wait_for_transaction(txn_hash)
    logger.info(f"done alice: {txn_hash}")
    return txn_hash


async def run_store_admin(
    client: StoreClient, alice: Account, bob: Account, amount: Optional[int] = None
) -> List[str]:
    """
    Alice stores a value, hands the admin role to Bob and Bob hands it back.

    Only the store transaction is waited on; the admin rotations are submitted
    back to back.
    """
    amount = now_ms() if amount is None else amount
    store_hash = await client.store(alice, alice, amount)
    hashes = [
        store_hash,
        await client.set_admin(alice, alice, bob),
        await client.set_admin(alice, bob, alice),
    ]
    await client.wait_for_transaction(store_hash)
    logger.info("done.")
    return hashes


async def run_store_user(
    client: StoreClient,
    module: Account,
    accounts: Sequence[Account],
    amount: Optional[int] = None,
    concurrent: bool = True,
) -> List[str]:
    """
    Every account calls user_store on `module`'s store, concurrently or in turn.

    A failure in any call propagates; with `concurrent=True` the other calls
    of the batch are not waited for.
    """

    async def store_for(account: Account) -> str:
        txn_hash = await client.user_store(module, account, now_ms() if amount is None else amount)
        await client.wait_for_transaction(txn_hash)
        logger.info(f"hash: {txn_hash}")
        return txn_hash

    if concurrent:
        hashes = list(await asyncio.gather(*(store_for(account) for account in accounts)))
    else:
        hashes = []
        for account in accounts:
            hashes.append(await store_for(account))
    logger.info("done.")
    return hashes


async def run_faucet(
    faucet: FaucetClient,
    accounts: Sequence[Account],
    amount: int = FAUCET_AMOUNT,
    rounds: int = 1,
) -> int:
    logger.info("=== Addresses ===")
    for account in accounts:
        logger.info(account_hex(account))
    return await fund_accounts(faucet, [account.address() for account in accounts], amount, rounds)
