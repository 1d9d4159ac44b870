"""
Core components: payload types, account helpers and the REST client wrapper.
"""

from .datatypes import (
    EntryFunctionPayload,
    TypedArg,
    TokenDataId,
    TokenId,
    normalize_address,
    APTOS_COIN,
    U64_MAX,
)
from .account import load_account, account_hex, pick_trading_pair
from .client import DemoClient, create_client

__all__ = [
    "EntryFunctionPayload",
    "TypedArg",
    "TokenDataId",
    "TokenId",
    "normalize_address",
    "APTOS_COIN",
    "U64_MAX",
    "load_account",
    "account_hex",
    "pick_trading_pair",
    "DemoClient",
    "create_client",
]
