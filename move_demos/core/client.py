# move_demos/core/client.py
"""
Thin wrapper around the Aptos REST client used by every demo flow.
"""
from typing import Optional

from aptos_sdk.account import Account
from aptos_sdk.account_address import AccountAddress
from aptos_sdk.async_client import RestClient

from ..config.settings import settings, logger
from .datatypes import EntryFunctionPayload, normalize_address


class DemoClient(RestClient):
    """REST client that submits EntryFunctionPayload triples."""

    async def submit_payload(self, sender: Account, payload: EntryFunctionPayload) -> str:
        """
        Generates, signs and submits a transaction without waiting for it.

        Returns:
            str: The pending transaction hash.
        """
        signed_transaction = await self.create_bcs_signed_transaction(
            sender, payload.to_transaction_payload()
        )
        txn_hash = await self.submit_bcs_transaction(signed_transaction)
        logger.debug(f"Submitted {payload.function} from {sender.address()}: {txn_hash}")
        return txn_hash

    async def transaction_wrapper(self, sender: Account, payload: EntryFunctionPayload) -> str:
        """
        Submits a payload and waits until the transaction is committed.

        The SDK's wait raises if the transaction did not succeed.

        Returns:
            str: The committed transaction hash.
        """
        try:
            txn_hash = await self.submit_payload(sender, payload)
            await self.wait_for_transaction(txn_hash)
        except Exception as e:
            logger.error(f"Failed to execute {payload.function}: {e}")
            raise
        logger.info(f"{payload.function_name} committed: {txn_hash}")
        return txn_hash

    async def coin_balance(self, address) -> int:
        """APT balance in octas."""
        return await self.account_balance(AccountAddress.from_str(normalize_address(address)))


def create_client(node_url: Optional[str] = None) -> DemoClient:
    node_url = node_url or settings.APTOS_NODE_URL
    logger.debug(f"Connecting to Aptos node at {node_url}")
    return DemoClient(node_url)
