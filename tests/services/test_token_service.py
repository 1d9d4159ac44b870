import pytest
from unittest.mock import AsyncMock, MagicMock

from aptos_sdk.async_client import ApiError, ResourceNotFound

from move_demos.core.datatypes import (
    U64_MAX,
    VECTOR_BOOL,
    TokenDataId,
    TokenId,
    normalize_address,
)
from move_demos.service.token_service import (
    claim_token_payload,
    create_collection_payload,
    create_token_payload,
    get_token_balance,
    offer_token_payload,
)

CREATOR = "0x" + "cd" * 32
OWNER = "0x" + "ef" * 32


def test_create_collection_payload():
    payload = create_collection_payload("Aptos Shogun", "Description sample", "https://zenno.moe")
    assert payload.function == "0x3::token::create_collection_script"
    assert payload.values() == [
        "Aptos Shogun",
        "Description sample",
        "https://zenno.moe",
        U64_MAX,
        [False, False, False],
    ]
    assert payload.signature()[-1] == VECTOR_BOOL


def test_create_token_payload_defaults_royalty_to_creator():
    payload = create_token_payload(CREATOR, "Aptos Shogun", "Aptos Shogun #7", "desc", 1, "uri")
    values = payload.values()
    assert payload.function_name == "create_token_script"
    assert values[:9] == ["Aptos Shogun", "Aptos Shogun #7", "desc", 1, U64_MAX, "uri", CREATOR, 0, 0]
    assert values[9:] == [[False] * 5, [], [], []]
    # Every argument must be encodable
    assert len(payload.to_transaction_payload().value.args) == 13


def test_offer_and_claim_payloads():
    offer = offer_token_payload(OWNER, CREATOR, "Aptos Shogun", "Aptos Shogun #7", 0, 1)
    assert offer.function == "0x3::token_transfers::offer_script"
    assert offer.values() == [OWNER, CREATOR, "Aptos Shogun", "Aptos Shogun #7", 0, 1]

    claim = claim_token_payload(CREATOR, CREATOR, "Aptos Shogun", "Aptos Shogun #7", 0)
    assert claim.function == "0x3::token_transfers::claim_script"
    assert claim.values() == [CREATOR, CREATOR, "Aptos Shogun", "Aptos Shogun #7", 0]


@pytest.fixture
def token_id():
    return TokenId(TokenDataId(CREATOR, "Aptos Shogun", "Aptos Shogun #7"), 0)


@pytest.mark.asyncio
async def test_get_token_balance_reads_token_store(token_id):
    client = MagicMock()
    client.account_resource = AsyncMock(return_value={"data": {"tokens": {"handle": "0x99"}}})
    client.get_table_item = AsyncMock(return_value={"amount": "1"})

    assert await get_token_balance(client, OWNER, token_id) == 1
    client.get_table_item.assert_awaited_once_with(
        "0x99", "0x3::token::TokenId", "0x3::token::Token", token_id.to_table_key()
    )
    owner_address, resource_type = client.account_resource.await_args.args
    assert str(owner_address) == normalize_address(OWNER)
    assert resource_type == "0x3::token::TokenStore"


@pytest.mark.asyncio
async def test_get_token_balance_without_store(token_id):
    client = MagicMock()
    client.account_resource = AsyncMock(side_effect=ResourceNotFound("missing", "0x3::token::TokenStore"))
    assert await get_token_balance(client, OWNER, token_id) == 0


@pytest.mark.asyncio
async def test_get_token_balance_without_entry(token_id):
    client = MagicMock()
    client.account_resource = AsyncMock(return_value={"data": {"tokens": {"handle": "0x99"}}})
    client.get_table_item = AsyncMock(side_effect=ApiError("table item not found", 404))
    assert await get_token_balance(client, OWNER, token_id) == 0
