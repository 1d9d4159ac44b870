# move_demos/service/query_service.py

from typing import Any, Dict

import aiohttp
from aptos_sdk.account_address import AccountAddress
from aptos_sdk.async_client import RestClient

from ..config.settings import logger
from ..core.datatypes import APTOS_COIN, normalize_address

OCTAS_PER_APT = 100_000_000


async def view_coin_balance(node_url: str, address: str, coin: str = APTOS_COIN) -> int:
    """
    Reads a coin balance through the 0x1::coin::balance view function.

    Returns:
        int: Balance in the coin's smallest unit.

    Raises:
        aiohttp.ClientError: On transport errors or a non-2xx response.
    """
    view_payload = {
        "function": "0x1::coin::balance",
        "type_arguments": [coin],
        "arguments": [address],
    }
    async with aiohttp.ClientSession() as session:
        async with session.post(f"{node_url.rstrip('/')}/view", json=view_payload) as response:
            response.raise_for_status()
            result = await response.json()
    return int(result[0]) if result else 0


async def get_account_info(address: str, client: RestClient) -> Dict[str, Any]:
    """
    Retrieve information about an Aptos account, including:
      - Account balance in APT
      - Sequence number
      - Number of resources

    Args:
        address (str): An Aptos account address (with or without 0x prefix)
        client (RestClient): An initialized Aptos REST client

    Returns:
        Dict: {"address", "balance_apt", "sequence_number", "resource_count"}
    """
    address = normalize_address(address)
    account_address = AccountAddress.from_str(address)

    try:
        resources = await client.account_resources(account_address)
    except Exception as e:
        logger.error(f"Error fetching resources for account {address}: {e}")
        resources = []

    balance_apt = 0.0
    try:
        balance_apt = await view_coin_balance(str(client.base_url), address) / OCTAS_PER_APT
    except (aiohttp.ClientError, ValueError) as e:
        logger.error(f"Error fetching APT balance for account {address}: {e}")

    sequence_number = 0
    try:
        account_data = await client.account(account_address)
        sequence_number = int(account_data.get("sequence_number", 0))
    except Exception as e:
        logger.error(f"Error fetching account {address}: {e}")

    result = {
        "address": address,
        "balance_apt": balance_apt,
        "sequence_number": sequence_number,
        "resource_count": len(resources),
    }
    logger.debug(f"[get_account_info] {result}")
    return result
