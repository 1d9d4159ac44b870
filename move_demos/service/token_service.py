# move_demos/service/token_service.py
"""
Token (0x3::token, v1 standard) service functions.

This module builds the payloads for:
- Creating collections and tokens
- Offering a token to another account and claiming it
and reads token balances out of an owner's TokenStore.
"""

from typing import Optional

from aptos_sdk.account_address import AccountAddress
from aptos_sdk.async_client import ApiError, ResourceNotFound, RestClient

from ..config.settings import logger
from ..core.datatypes import (
    EntryFunctionPayload,
    TokenId,
    TypedArg,
    U64_MAX,
    VECTOR_BOOL,
    VECTOR_BYTES,
    VECTOR_STRING,
    address,
    normalize_address,
    string,
    u64,
)

TOKEN_MODULE = "0x3::token"
TOKEN_TRANSFERS_MODULE = "0x3::token_transfers"
TOKEN_STORE = "0x3::token::TokenStore"


def create_collection_payload(
    collection_name: str,
    description: str,
    uri: str,
    maximum: int = U64_MAX,
) -> EntryFunctionPayload:
    return EntryFunctionPayload(
        function=f"{TOKEN_MODULE}::create_collection_script",
        type_arguments=[],
        arguments=[
            string(collection_name),
            string(description),
            string(uri),
            u64(maximum),
            TypedArg(VECTOR_BOOL, [False, False, False]),  # description, uri, maximum
        ],
    )


def create_token_payload(
    creator: str,
    collection_name: str,
    name: str,
    description: str,
    supply: int,
    uri: str,
    maximum: int = U64_MAX,
    royalty_payee: Optional[str] = None,
    royalty_points_denominator: int = 0,
    royalty_points_numerator: int = 0,
) -> EntryFunctionPayload:
    """
    Payload for 0x3::token::create_token_script.

    Args:
        creator (str): Creator address, also the default royalty payee.
        collection_name (str): Collection the token is minted into.
        name (str): Token name, unique inside the collection.
        description (str): Token description.
        supply (int): Amount minted to the creator.
        uri (str): Token media URI.
        maximum (int): Maximum supply of the token data.
        royalty_payee (str, optional): Address receiving royalties.
        royalty_points_denominator (int): Royalty denominator.
        royalty_points_numerator (int): Royalty numerator.

    Returns:
        EntryFunctionPayload: The create_token_script payload.
    """
    return EntryFunctionPayload(
        function=f"{TOKEN_MODULE}::create_token_script",
        type_arguments=[],
        arguments=[
            string(collection_name),
            string(name),
            string(description),
            u64(supply),
            u64(maximum),
            string(uri),
            address(royalty_payee or creator),
            u64(royalty_points_denominator),
            u64(royalty_points_numerator),
            # maximum, uri, royalty, description, properties
            TypedArg(VECTOR_BOOL, [False, False, False, False, False]),
            TypedArg(VECTOR_STRING, []),
            TypedArg(VECTOR_BYTES, []),
            TypedArg(VECTOR_STRING, []),
        ],
    )


def offer_token_payload(
    receiver: str,
    creator: str,
    collection_name: str,
    token_name: str,
    property_version: int,
    amount: int,
) -> EntryFunctionPayload:
    return EntryFunctionPayload(
        function=f"{TOKEN_TRANSFERS_MODULE}::offer_script",
        type_arguments=[],
        arguments=[
            address(receiver),
            address(creator),
            string(collection_name),
            string(token_name),
            u64(property_version),
            u64(amount),
        ],
    )


def claim_token_payload(
    sender: str,
    creator: str,
    collection_name: str,
    token_name: str,
    property_version: int,
) -> EntryFunctionPayload:
    return EntryFunctionPayload(
        function=f"{TOKEN_TRANSFERS_MODULE}::claim_script",
        type_arguments=[],
        arguments=[
            address(sender),
            address(creator),
            string(collection_name),
            string(token_name),
            u64(property_version),
        ],
    )


async def get_token_balance(client: RestClient, owner: str, token_id: TokenId) -> int:
    """
    Reads how many units of a token an account holds.

    Args:
        client (RestClient): The Aptos REST client
        owner (str): The owner's address
        token_id (TokenId): The token to look up

    Returns:
        int: The amount held, 0 if the owner has no TokenStore or no entry
             for this token.
    """
    owner_address = AccountAddress.from_str(normalize_address(owner))
    try:
        resource = await client.account_resource(owner_address, TOKEN_STORE)
        handle = resource["data"]["tokens"]["handle"]
        token = await client.get_table_item(
            handle,
            "0x3::token::TokenId",
            "0x3::token::Token",
            token_id.to_table_key(),
        )
    except (ApiError, ResourceNotFound) as e:
        logger.warning(f"Token {token_id.token_data_id.name} not found for {owner}: {e}")
        return 0
    return int(token["amount"])
