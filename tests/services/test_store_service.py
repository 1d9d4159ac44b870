import pytest
import pytest_asyncio
from unittest.mock import AsyncMock, patch

from move_demos.core.datatypes import normalize_address
from move_demos.service.store_service import (
    StoreClient,
    admin_store_payload,
    set_admin_payload,
    user_store_payload,
)

MODULE = "0x" + "56" * 32


def test_store_payloads():
    assert admin_store_payload(MODULE, 42).function == f"{MODULE}::learning02::admin_store"
    assert admin_store_payload(MODULE, 42).values() == [42]

    admin = set_admin_payload(MODULE, "0x7")
    assert admin.function == f"{MODULE}::learning02::set_admin_address"
    assert admin.values() == [normalize_address("0x7")]

    user = user_store_payload(MODULE, 1, module_name="learning04")
    assert user.function == f"{MODULE}::learning04::user_store"


@pytest_asyncio.fixture
async def store_client():
    client = StoreClient("http://localhost:8080/v1", admin_module="learning02", user_module="learning07")
    yield client
    await client.close()


@pytest.mark.asyncio
async def test_store_client_signs_with_signer(store_client, alice, bob):
    with patch.object(store_client, "submit_payload", AsyncMock(return_value="0xh")) as submit:
        await store_client.user_store(alice, bob, 9)

    signer, payload = submit.await_args.args
    assert signer is bob
    assert payload.function == f"{normalize_address(alice.address())}::learning07::user_store"
    assert payload.values() == [9]
