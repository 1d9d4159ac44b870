# move_demos/core/account.py
"""
Account helpers: derive accounts from hex private keys and pick demo roles.
"""
import random
from typing import Optional, Sequence, Tuple

from aptos_sdk.account import Account

from ..config.settings import logger
from .datatypes import normalize_address

# Pre-funded devnet wallets used when the marketplace demo picks a random
# seller and buyer.
DEMO_WALLET_KEYS = (
    "0xbf2705b6262428525219c0144a2b6329fe6c06ff8a7586bd07ee90c844bd35ff",
    "0x4b22142d0aaa4fa23aa9d7872558224ec060cea839089437a285c21318b269e6",
    "0xd5cf7bc8c5ce5375eb5dbf99f9e6aaf924b968b5ee318756c28b88c0688fe887",
    "0xaf281192761dcccbc50f952632818b97010244a94a31f186af680e15de4fda43",
    "0x7e34128dc8ee5dd0bc8798e48a00e111760edda00ae8f4e51058e69235c51bc6",
)


def load_account(private_key: Optional[str], role: str = "account") -> Account:
    """
    Loads an account from a hex private key, or generates a throwaway one.

    Args:
        private_key (str, optional): Hex encoded ed25519 key, with or without 0x.
        role (str): Name used in log messages.

    Returns:
        Account: The Aptos account.
    """
    if private_key:
        return Account.load_key(private_key)
    logger.warning(f"No private key configured for {role}; generating a random account")
    return Account.generate()


def account_hex(account: Account) -> str:
    """Long-form 0x address of an account."""
    return normalize_address(account.address())


def pick_trading_pair(
    keys: Sequence[str] = DEMO_WALLET_KEYS,
    rng: Optional[random.Random] = None,
) -> Tuple[str, str]:
    """
    Picks two distinct keys: (seller_key, buyer_key).

    Raises:
        ValueError: If fewer than two distinct keys are given.
    """
    distinct = list(dict.fromkeys(keys))
    if len(distinct) < 2:
        raise ValueError("At least two distinct wallet keys are required")
    rng = rng or random.Random()
    seller_key = rng.choice(distinct)
    buyer_key = rng.choice([k for k in distinct if k != seller_key])
    return seller_key, buyer_key
