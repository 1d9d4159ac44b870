# move_demos/flows/marketplace_flow.py
"""
Marketplace demo flow.

A dev account owns the collection and the marketplace; it mints a token and
hands it to a seller, who lists, delists, relists and re-prices it; a buyer
then buys it. Steps run strictly in order and the first failing step stops
the run.
"""

import random
from typing import Awaitable, Callable, Dict, List, Optional, Sequence

from aptos_sdk.account import Account
from aptos_sdk.async_client import FaucetClient

from ..config.settings import logger
from ..core.account import account_hex
from ..core.client import DemoClient
from ..core.datatypes import TokenDataId, TokenId
from ..service.market_service import Marketplace, MarketplaceClient
from ..service.token_service import (
    claim_token_payload,
    create_collection_payload,
    create_token_payload,
    get_token_balance,
    offer_token_payload,
)

COLLECTION_NAME = "Aptos Shogun"
COLLECTION_DESCRIPTION = "Description sample"
COLLECTION_URI = "https://zenno.moe"
TOKEN_DESCRIPTION = (
    "Influenced by the ancient chronicles of Japan, Aptos Shogun Collection is "
    "a collection of 6659 Shogun and their virtual world."
)
TOKEN_URI_TEMPLATE = "https://aptos-api-testnet.bluemove.net/uploads/aptos-shogun/{number}.jpg"
FUND_AMOUNT = 100_000_000
UPDATED_PRICE = 2

DEMO_STEPS = (
    "create_token",
    "list_token",
    "delist_token",
    "list_token",
    "update_price",
    "buy_token",
)
REPORT_STEPS = (
    "print_addresses",
    "wallet_balances",
    "create_token",
    "token_balances",
    "list_token",
    "token_balances",
    "delist_token",
    "token_balances",
    "list_token",
    "token_balances",
    "update_price",
    "token_balances",
    "wallet_balances",
)
# Once per deployment
SETUP_STEPS = ("create_collection", "initialize_market")
FUND_STEPS = ("fund",)


class MarketplaceDemo:
    """
    Runs the marketplace demo against a deployed marketplace module.

    Args:
        client (DemoClient): Client used for every transaction
        dev (Account): Owner of the marketplace and of the collection
        seller (Account): Receives the minted token and lists it
        buyer (Account): Buys the listed token
        marketplace (Marketplace): Target marketplace module
        faucet (FaucetClient, optional): Needed only by the `fund` step
        collection_name (str): Collection the token is minted into
        token_number (int, optional): Token suffix, random in [1, 200] when omitted
        property_version (int): Property version used for sales and lookups
        token_amount (int): Units minted and traded, 1 for an NFT
        rng (random.Random, optional): Randomness for token number and prices
    """

    def __init__(
        self,
        client: DemoClient,
        dev: Account,
        seller: Account,
        buyer: Account,
        marketplace: Marketplace,
        faucet: Optional[FaucetClient] = None,
        collection_name: str = COLLECTION_NAME,
        token_number: Optional[int] = None,
        property_version: int = 0,
        token_amount: int = 1,
        rng: Optional[random.Random] = None,
    ):
        self.client = client
        self.faucet = faucet
        self.dev = dev
        self.seller = seller
        self.buyer = buyer
        self.rng = rng or random.Random()
        self.collection_name = collection_name
        self.token_number = self.rng.randint(1, 200) if token_number is None else token_number
        self.token_name = f"{collection_name} #{self.token_number}"
        self.token_amount = token_amount
        self.property_version = property_version
        self.market = MarketplaceClient(client, marketplace, property_version, token_amount)
        self.last_price: Optional[int] = None

        self._steps: Dict[str, Callable[[], Awaitable[None]]] = {
            "fund": self.fund,
            "print_addresses": self.print_addresses,
            "wallet_balances": self.wallet_balances,
            "create_collection": self.create_collection,
            "create_token": self.create_token,
            "initialize_market": self.initialize_market,
            "list_token": self.list_token,
            "delist_token": self.delist_token,
            "update_price": self.update_price,
            "buy_token": self.buy_token,
            "token_balances": self.token_balances,
        }

    @property
    def dev_address(self) -> str:
        return account_hex(self.dev)

    @property
    def token_data_id(self) -> TokenDataId:
        return TokenDataId(self.dev_address, self.collection_name, self.token_name)

    @property
    def token_id(self) -> TokenId:
        return TokenId(self.token_data_id, self.property_version)

    async def run(self, steps: Sequence[str] = DEMO_STEPS) -> List[str]:
        """
        Runs the named steps in order.

        Returns:
            List[str]: The steps that completed.

        Raises:
            ValueError: If a step name is unknown; nothing runs in that case.
        """
        unknown = [name for name in steps if name not in self._steps]
        if unknown:
            raise ValueError(f"Unknown demo steps: {', '.join(unknown)}")

        completed = []
        for name in steps:
            await self._steps[name]()
            completed.append(name)
        return completed

    async def fund(self):
        logger.info("=== Fund Dev, Seller, Buyer ===")
        if self.faucet is None:
            raise RuntimeError("The fund step needs a faucet client")
        for account in (self.dev, self.seller, self.buyer):
            await self.faucet.fund_account(account.address(), FUND_AMOUNT)

    async def print_addresses(self):
        logger.info(f"Dev Address: {self.dev_address}")
        logger.info(f"Seller Address: {account_hex(self.seller)}")
        logger.info(f"Buyer Address: {account_hex(self.buyer)}")

    async def wallet_balances(self):
        for role, account in (("Dev", self.dev), ("Seller", self.seller), ("Buyer", self.buyer)):
            balance = await self.client.coin_balance(account.address())
            logger.info(f"{role}'s aptos coin balance: {balance}")

    async def create_collection(self):
        logger.info("=== Creating Collection ===")
        await self.client.transaction_wrapper(
            self.dev,
            create_collection_payload(self.collection_name, COLLECTION_DESCRIPTION, COLLECTION_URI),
        )

    async def create_token(self):
        logger.info("=== Creating Token ===")
        logger.info(f"Token Name: {self.token_name}")
        seller_address = account_hex(self.seller)
        await self.client.transaction_wrapper(
            self.dev,
            create_token_payload(
                self.dev_address,
                self.collection_name,
                self.token_name,
                TOKEN_DESCRIPTION,
                self.token_amount,
                TOKEN_URI_TEMPLATE.format(number=self.token_number),
            ),
        )
        await self.client.transaction_wrapper(
            self.dev,
            offer_token_payload(
                seller_address,
                self.dev_address,
                self.collection_name,
                self.token_name,
                self.property_version,
                self.token_amount,
            ),
        )
        await self.client.transaction_wrapper(
            self.seller,
            claim_token_payload(
                self.dev_address,
                self.dev_address,
                self.collection_name,
                self.token_name,
                self.property_version,
            ),
        )

    async def initialize_market(self):
        logger.info("=== Creating Marketplace ===")
        await self.market.initialize_market(self.dev)

    async def list_token(self):
        logger.info("=== List Token Marketplace ===")
        self.last_price = self.rng.randint(1, 10)
        await self.market.list_nft(self.seller, self.token_data_id, self.last_price)

    async def delist_token(self):
        logger.info("=== Delist Token Marketplace ===")
        await self.market.delist_nft(self.seller, self.token_data_id)

    async def update_price(self):
        logger.info("=== Update Price Marketplace ===")
        await self.market.update_nft_price(self.seller, self.token_data_id, UPDATED_PRICE)
        self.last_price = UPDATED_PRICE

    async def buy_token(self):
        logger.info("=== Buy Token Marketplace ===")
        await self.market.buy_nft(self.buyer, account_hex(self.seller), self.token_data_id)

    async def token_balances(self):
        seller_balance = await get_token_balance(self.client, account_hex(self.seller), self.token_id)
        buyer_balance = await get_token_balance(self.client, account_hex(self.buyer), self.token_id)
        logger.info(f"Seller's token balance: {seller_balance}")
        logger.info(f"Buyer's token balance: {buyer_balance}")
