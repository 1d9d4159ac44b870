import pytest
import pytest_asyncio
from unittest.mock import AsyncMock, patch

from aptos_sdk.async_client import ApiError, ResourceNotFound

from move_demos.core.datatypes import STRING, U64, U8, normalize_address
from move_demos.service.coin_service import (
    CoinClient,
    coin_store_type,
    coin_type,
    create_coin_payload,
    mint_coin_payload,
    register_coin_payload,
)

ISSUER = "0x" + "12" * 32
RECEIVER = "0x" + "34" * 32


def test_coin_type_strings():
    coin = coin_type("0x12", "LugonToken01", "LUS")
    assert coin == f"{normalize_address('0x12')}::LugonToken01::LUS"
    assert coin_store_type(coin) == f"0x1::coin::CoinStore<{coin}>"


def test_create_coin_payload():
    payload = create_coin_payload(ISSUER, RECEIVER, "TokenName01", "TN01", 10**9)
    assert payload.function == f"{ISSUER}::token05::create"
    assert payload.type_arguments == [f"{RECEIVER}::token05::LUS"]
    assert payload.values() == ["TokenName01", "TN01", 8, 10**9]
    assert payload.signature() == [STRING, STRING, U8, U64]


def test_register_and_mint_payloads():
    coin = coin_type(ISSUER, "LugonToken01", "LUS")
    register = register_coin_payload(coin)
    assert register.function == "0x1::managed_coin::register"
    assert register.type_arguments == [coin]
    assert register.arguments == []

    mint = mint_coin_payload(coin, RECEIVER, 100)
    assert mint.function == "0x1::managed_coin::mint"
    assert mint.values() == [RECEIVER, 100]


@pytest_asyncio.fixture
async def coin_client():
    client = CoinClient("http://localhost:8080/v1", module_name="LugonToken01", struct_name="LUS")
    yield client
    await client.close()


@pytest.mark.asyncio
async def test_get_balance_reads_coin_store(coin_client):
    resource = {"data": {"coin": {"value": "1000"}}}
    with patch.object(coin_client, "account_resource", AsyncMock(return_value=resource)) as lookup:
        assert await coin_client.get_balance(RECEIVER, ISSUER) == 1000
    _, resource_type = lookup.await_args.args
    assert resource_type == f"0x1::coin::CoinStore<{ISSUER}::LugonToken01::LUS>"


@pytest.mark.asyncio
async def test_get_balance_falls_back_to_zero(coin_client):
    error = ResourceNotFound("missing", "CoinStore")
    with patch.object(coin_client, "account_resource", AsyncMock(side_effect=error)):
        assert await coin_client.get_balance(RECEIVER, ISSUER) == 0


@pytest.mark.asyncio
async def test_is_registered(coin_client):
    with patch.object(coin_client, "account_resource", AsyncMock(return_value={"data": {}})):
        assert await coin_client.is_registered(RECEIVER, ISSUER) is True
    with patch.object(coin_client, "account_resource", AsyncMock(side_effect=ApiError("gone", 404))):
        assert await coin_client.is_registered(RECEIVER, ISSUER) is False


@pytest.mark.asyncio
async def test_register_and_mint_use_same_coin(coin_client, alice, bob):
    with patch.object(coin_client, "submit_payload", AsyncMock(return_value="0xh")) as submit:
        await coin_client.register_coin(alice.address(), bob)
        await coin_client.mint_coin(alice, bob.address(), 5)

    (register_sender, register), (mint_sender, mint) = [c.args for c in submit.await_args_list]
    assert register_sender is bob
    assert mint_sender is alice
    assert register.type_arguments == mint.type_arguments
