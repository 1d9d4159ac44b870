# move_demos/service/market_service.py
"""
Marketplace contract service.

Payload builders for the marketplace module (initialise, whitelist a coin,
create/cancel/edit a sale, make an order) and a small client that submits
them for a seller or buyer.
"""

from dataclasses import dataclass
from typing import List

from aptos_sdk.account import Account

from ..config.settings import logger
from ..core.client import DemoClient
from ..core.datatypes import (
    APTOS_COIN,
    EntryFunctionPayload,
    TokenDataId,
    address,
    boolean,
    normalize_address,
    string,
    u64,
)


def _token_args(token_data_id: TokenDataId) -> list:
    return [
        address(token_data_id.creator),  # creators_address: address
        string(token_data_id.collection),  # collection: String
        string(token_data_id.name),  # name: String
    ]


@dataclass
class Marketplace:
    """A marketplace module deployed at `address::module_name`, trading in `coin_type`."""
    address: str
    module_name: str = "marketplace01"
    coin_type: str = APTOS_COIN

    def __post_init__(self):
        self.address = normalize_address(self.address)

    def function_id(self, name: str) -> str:
        return f"{self.address}::{self.module_name}::{name}"

    @property
    def coin_type_args(self) -> List[str]:
        return [self.coin_type]

    def initialize_market(
        self,
        admin: str,
        fee_recipient: str,
        fee_percentage: int = 10,
        handle_royalty: bool = False,
    ) -> EntryFunctionPayload:
        return EntryFunctionPayload(
            function=self.function_id("initialize_market"),
            type_arguments=[],
            arguments=[
                address(admin),
                address(fee_recipient),
                u64(fee_percentage),
                boolean(handle_royalty),
            ],
        )

    def add_coin_type_to_whitelist(self) -> EntryFunctionPayload:
        return EntryFunctionPayload(
            function=self.function_id("add_coin_type_to_whitelist"),
            type_arguments=self.coin_type_args,
            arguments=[],
        )

    def create_sale(
        self,
        token_data_id: TokenDataId,
        property_version: int,
        token_amount: int,
        price: int,
        locked_until_secs: int = 0,
    ) -> EntryFunctionPayload:
        return EntryFunctionPayload(
            function=self.function_id("create_sale"),
            type_arguments=self.coin_type_args,
            arguments=_token_args(token_data_id) + [
                u64(property_version),
                u64(token_amount),
                u64(price),  # price per token
                u64(locked_until_secs),  # 0 for no lock
            ],
        )

    def cancel_sale(self, token_data_id: TokenDataId, property_version: int) -> EntryFunctionPayload:
        return EntryFunctionPayload(
            function=self.function_id("cancel_sale"),
            type_arguments=self.coin_type_args,
            arguments=_token_args(token_data_id) + [u64(property_version)],
        )

    def edit_price(
        self, token_data_id: TokenDataId, property_version: int, price: int
    ) -> EntryFunctionPayload:
        return EntryFunctionPayload(
            function=self.function_id("edit_price"),
            type_arguments=self.coin_type_args,
            arguments=_token_args(token_data_id) + [u64(property_version), u64(price)],
        )

    def make_order(
        self,
        seller: str,
        token_data_id: TokenDataId,
        property_version: int,
        token_amount: int,
    ) -> EntryFunctionPayload:
        return EntryFunctionPayload(
            function=self.function_id("make_order"),
            type_arguments=self.coin_type_args,
            arguments=[address(seller)] + _token_args(token_data_id) + [
                u64(property_version),
                u64(token_amount),
            ],
        )


class MarketplaceClient:
    """
    Submits marketplace payloads and waits for each to commit.

    Args:
        client (DemoClient): Client used for submission
        marketplace (Marketplace): Target marketplace module
        property_version (int): Property version of the traded tokens
        token_amount (int): Units per sale/order, 1 for an NFT
    """

    def __init__(
        self,
        client: DemoClient,
        marketplace: Marketplace,
        property_version: int = 1,
        token_amount: int = 1,
    ):
        self.client = client
        self.marketplace = marketplace
        self.property_version = property_version
        self.token_amount = token_amount

    async def initialize_market(self, dev: Account, fee_percentage: int = 10) -> List[str]:
        """Initialises the market with `dev` as admin and fee recipient, then whitelists the coin."""
        dev_addr = normalize_address(dev.address())
        hashes = [
            await self.client.transaction_wrapper(
                dev,
                self.marketplace.initialize_market(dev_addr, dev_addr, fee_percentage, False),
            ),
            # The coin type must be whitelisted before anything can be listed for it
            await self.client.transaction_wrapper(
                dev, self.marketplace.add_coin_type_to_whitelist()
            ),
        ]
        return hashes

    async def list_nft(self, seller: Account, token_data_id: TokenDataId, price: int) -> str:
        logger.info(f"Listing {token_data_id.name} for {price}")
        return await self.client.transaction_wrapper(
            seller,
            self.marketplace.create_sale(
                token_data_id, self.property_version, self.token_amount, price, 0
            ),
        )

    async def delist_nft(self, seller: Account, token_data_id: TokenDataId) -> str:
        logger.info(f"Delisting {token_data_id.name}")
        return await self.client.transaction_wrapper(
            seller, self.marketplace.cancel_sale(token_data_id, self.property_version)
        )

    async def update_nft_price(
        self, seller: Account, token_data_id: TokenDataId, new_price: int
    ) -> str:
        logger.info(f"Updating price of {token_data_id.name} to {new_price}")
        return await self.client.transaction_wrapper(
            seller,
            self.marketplace.edit_price(token_data_id, self.property_version, new_price),
        )

    async def buy_nft(self, buyer: Account, seller_address: str, token_data_id: TokenDataId) -> str:
        logger.info(f"Buying {token_data_id.name} from {seller_address}")
        return await self.client.transaction_wrapper(
            buyer,
            self.marketplace.make_order(
                seller_address, token_data_id, self.property_version, self.token_amount
            ),
        )
