import pytest
from unittest.mock import AsyncMock, MagicMock

from move_demos.flows.coin_flow import (
    run_creator_coin,
    run_faucet,
    run_sample_coin,
    run_store_admin,
    run_store_user,
)


@pytest.fixture
def coin_client():
    client = MagicMock()
    client.is_registered = AsyncMock(return_value=False)
    client.register_coin = AsyncMock(return_value="0xregister")
    client.mint_coin = AsyncMock(return_value="0xmint")
    client.create_coin = AsyncMock(return_value="0xcreate")
    client.get_balance = AsyncMock(side_effect=[0, 500])
    client.wait_for_transaction = AsyncMock()
    return client


@pytest.mark.asyncio
async def test_sample_coin_registers_then_mints(coin_client, alice, bob):
    balances = await run_sample_coin(coin_client, alice, bob, amount=500)

    assert balances == {"initial": 0, "updated": 500}
    coin_client.register_coin.assert_awaited_once_with(alice.address(), bob)
    coin_client.mint_coin.assert_awaited_once_with(alice, bob.address(), 500)
    assert [c.args[0] for c in coin_client.wait_for_transaction.await_args_list] == [
        "0xregister",
        "0xmint",
    ]


@pytest.mark.asyncio
async def test_sample_coin_skips_registration(coin_client, alice, bob):
    coin_client.is_registered.return_value = True

    await run_sample_coin(coin_client, alice, bob)

    coin_client.register_coin.assert_not_awaited()
    coin_client.mint_coin.assert_awaited_once()


@pytest.mark.asyncio
async def test_creator_coin_waits_for_commit(coin_client, alice):
    assert await run_creator_coin(coin_client, alice, "Name", "SYM", 10) == "0xcreate"
    coin_client.create_coin.assert_awaited_once_with(alice, alice, "Name", "SYM", 10)
    coin_client.wait_for_transaction.assert_awaited_once_with("0xcreate")


@pytest.mark.asyncio
async def test_store_admin_rotates_admin_and_waits_on_store(alice, bob):
    client = MagicMock()
    client.store = AsyncMock(return_value="0xstore")
    client.set_admin = AsyncMock(side_effect=["0xtobob", "0xtoalice"])
    client.wait_for_transaction = AsyncMock()

    hashes = await run_store_admin(client, alice, bob, amount=1)

    assert hashes == ["0xstore", "0xtobob", "0xtoalice"]
    client.store.assert_awaited_once_with(alice, alice, 1)
    assert [c.args for c in client.set_admin.await_args_list] == [(alice, alice, bob), (alice, bob, alice)]
    client.wait_for_transaction.assert_awaited_once_with("0xstore")


@pytest.mark.asyncio
@pytest.mark.parametrize("concurrent", [True, False])
async def test_store_user_submits_for_each_account(alice, bob, concurrent):
    client = MagicMock()
    client.user_store = AsyncMock(side_effect=["0xa", "0xb"])
    client.wait_for_transaction = AsyncMock()

    hashes = await run_store_user(client, alice, [alice, bob], amount=3, concurrent=concurrent)

    assert sorted(hashes) == ["0xa", "0xb"]
    assert [c.args[1] for c in client.user_store.await_args_list] == [alice, bob]
    assert client.wait_for_transaction.await_count == 2


@pytest.mark.asyncio
@pytest.mark.parametrize("concurrent", [True, False])
async def test_store_user_propagates_failure(alice, bob, concurrent):
    client = MagicMock()
    client.user_store = AsyncMock(side_effect=["0xa", RuntimeError("rejected")])
    client.wait_for_transaction = AsyncMock()

    with pytest.raises(RuntimeError):
        await run_store_user(client, alice, [alice, bob], amount=3, concurrent=concurrent)


@pytest.mark.asyncio
async def test_run_faucet(alice, bob):
    faucet = MagicMock()
    faucet.fund_account = AsyncMock()

    assert await run_faucet(faucet, [alice, bob], amount=10, rounds=1) == 4
