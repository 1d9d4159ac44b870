# move_demos/service/coin_service.py
"""
Managed coin service: create a coin, register an account for it, mint it
and read balances.
"""

from typing import Union

from aptos_sdk.account import Account
from aptos_sdk.account_address import AccountAddress
from aptos_sdk.async_client import ApiError, ResourceNotFound

from ..config.settings import settings, logger
from ..core.client import DemoClient
from ..core.datatypes import EntryFunctionPayload, address, normalize_address, string, u8, u64

MANAGED_COIN_MODULE = "0x1::managed_coin"


def coin_type(coin_address: Union[str, AccountAddress], module_name: str, struct_name: str) -> str:
    return f"{normalize_address(coin_address)}::{module_name}::{struct_name}"


def coin_store_type(coin: str) -> str:
    return f"0x1::coin::CoinStore<{coin}>"


def create_coin_payload(
    module_address: str,
    owner_address: str,
    name: str,
    symbol: str,
    supply: int,
    decimals: int = 8,
    module_name: str = "token05",
    struct_name: str = "LUS",
) -> EntryFunctionPayload:
    return EntryFunctionPayload(
        function=f"{normalize_address(module_address)}::{module_name}::create",
        type_arguments=[coin_type(owner_address, module_name, struct_name)],
        arguments=[string(name), string(symbol), u8(decimals), u64(supply)],
    )


def register_coin_payload(coin: str) -> EntryFunctionPayload:
    return EntryFunctionPayload(
        function=f"{MANAGED_COIN_MODULE}::register",
        type_arguments=[coin],
        arguments=[],
    )


def mint_coin_payload(coin: str, receiver_address: str, amount: int) -> EntryFunctionPayload:
    return EntryFunctionPayload(
        function=f"{MANAGED_COIN_MODULE}::mint",
        type_arguments=[coin],
        arguments=[address(receiver_address), u64(amount)],
    )


class CoinClient(DemoClient):
    """
    Client for a managed coin published as `<issuer>::<module_name>::<struct_name>`.
    """

    def __init__(
        self,
        base_url: str,
        module_name: str = None,
        struct_name: str = None,
        **kwargs,
    ):
        super().__init__(base_url, **kwargs)
        self.module_name = module_name or settings.COIN_MODULE
        self.struct_name = struct_name or settings.COIN_STRUCT

    def coin_for(self, coin_type_address) -> str:
        return coin_type(coin_type_address, self.module_name, self.struct_name)

    async def create_coin(
        self,
        module: Account,
        owner: Account,
        name: str,
        symbol: str,
        supply: int,
        decimals: int = 8,
        module_name: str = None,
    ) -> str:
        """Creates a coin owned by `owner` through the creator-coin module; returns the pending hash."""
        payload = create_coin_payload(
            module.address(),
            owner.address(),
            name,
            symbol,
            supply,
            decimals,
            module_name or settings.CREATOR_COIN_MODULE,
            self.struct_name,
        )
        return await self.submit_payload(owner, payload)

    async def register_coin(self, coin_type_address, coin_receiver: Account) -> str:
        """Register the receiver account to receive transfers for the new coin."""
        return await self.submit_payload(
            coin_receiver, register_coin_payload(self.coin_for(coin_type_address))
        )

    async def mint_coin(self, minter: Account, receiver_address, amount: int) -> str:
        """Mints the newly created coin to a specified receiver address."""
        return await self.submit_payload(
            minter,
            mint_coin_payload(self.coin_for(minter.address()), receiver_address, amount),
        )

    async def _coin_store(self, account_address, coin_type_address) -> dict:
        return await self.account_resource(
            AccountAddress.from_str(normalize_address(account_address)),
            coin_store_type(self.coin_for(coin_type_address)),
        )

    async def get_balance(self, account_address, coin_type_address) -> int:
        """Return the balance of the newly created coin, 0 if the account holds no CoinStore."""
        try:
            resource = await self._coin_store(account_address, coin_type_address)
        except (ApiError, ResourceNotFound) as e:
            logger.warning(f"Coin balance lookup failed for {account_address}: {e}")
            return 0
        return int(resource["data"]["coin"]["value"])

    async def is_registered(self, account_address, coin_type_address) -> bool:
        try:
            resource = await self._coin_store(account_address, coin_type_address)
        except (ApiError, ResourceNotFound) as e:
            logger.warning(f"{account_address} is not registered for the coin: {e}")
            return False
        logger.debug(f"CoinStore resource: {resource}")
        return True
