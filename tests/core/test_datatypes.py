import random

import pytest
from aptos_sdk.transactions import EntryFunction, TransactionPayload

from move_demos.core.account import DEMO_WALLET_KEYS, pick_trading_pair
from move_demos.core.datatypes import (
    ADDRESS,
    APTOS_COIN,
    EntryFunctionPayload,
    TokenDataId,
    TokenId,
    TypedArg,
    U64,
    address,
    normalize_address,
    u64,
)


def test_normalize_address_pads_short_form():
    assert normalize_address("0x1") == "0x" + "0" * 63 + "1"
    assert normalize_address("ABCD") == "0x" + "0" * 60 + "abcd"


@pytest.mark.parametrize("value", ["", "0x", "0xzz", "0x" + "1" * 65])
def test_normalize_address_rejects_invalid(value):
    with pytest.raises(ValueError):
        normalize_address(value)


def test_payload_signature_and_values():
    payload = EntryFunctionPayload(
        function="0x1::managed_coin::mint",
        type_arguments=["0x1::aptos_coin::AptosCoin"],
        arguments=[address("0x2"), u64(5)],
    )
    assert payload.module_id == "0x1::managed_coin"
    assert payload.function_name == "mint"
    assert payload.signature() == [ADDRESS, U64]
    assert payload.values() == [normalize_address("0x2"), 5]


def test_to_transaction_payload_encodes_arguments():
    payload = EntryFunctionPayload(
        function="0x1::managed_coin::mint",
        type_arguments=[APTOS_COIN],
        arguments=[address("0x2"), u64(5)],
    )

    txn_payload = payload.to_transaction_payload()

    assert isinstance(txn_payload, TransactionPayload)
    entry = txn_payload.value
    assert isinstance(entry, EntryFunction)
    assert entry.function == "mint"
    assert entry.module.name == "managed_coin"
    assert len(entry.ty_args) == 1
    assert entry.args[0] == bytes(31) + b"\x02"
    assert entry.args[1] == (5).to_bytes(8, "little")


def test_to_transaction_payload_rejects_malformed_function():
    payload = EntryFunctionPayload(function="0x1::mint")
    with pytest.raises(ValueError):
        payload.to_transaction_payload()


def test_unsupported_move_type():
    with pytest.raises(ValueError):
        TypedArg("u128", 1).to_transaction_argument()


def test_token_id_table_key():
    token_id = TokenId(TokenDataId("0x5", "Aptos Shogun", "Aptos Shogun #7"), 1)
    assert token_id.to_table_key() == {
        "token_data_id": {
            "creator": normalize_address("0x5"),
            "collection": "Aptos Shogun",
            "name": "Aptos Shogun #7",
        },
        "property_version": "1",
    }


def test_pick_trading_pair_is_distinct():
    for seed in range(20):
        seller_key, buyer_key = pick_trading_pair(rng=random.Random(seed))
        assert seller_key != buyer_key
        assert seller_key in DEMO_WALLET_KEYS
        assert buyer_key in DEMO_WALLET_KEYS


def test_pick_trading_pair_needs_two_keys():
    with pytest.raises(ValueError):
        pick_trading_pair(keys=[DEMO_WALLET_KEYS[0], DEMO_WALLET_KEYS[0]])
