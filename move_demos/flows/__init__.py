"""
Script drivers: fixed sequences of transactions run against a live network.
"""

from .marketplace_flow import (
    MarketplaceDemo,
    DEMO_STEPS,
    REPORT_STEPS,
    SETUP_STEPS,
    FUND_STEPS,
)
from .coin_flow import (
    run_sample_coin,
    run_creator_coin,
    run_store_admin,
    run_store_user,
    run_faucet,
)

__all__ = [
    "MarketplaceDemo",
    "DEMO_STEPS",
    "REPORT_STEPS",
    "SETUP_STEPS",
    "FUND_STEPS",
    "run_sample_coin",
    "run_creator_coin",
    "run_store_admin",
    "run_store_user",
    "run_faucet",
]
