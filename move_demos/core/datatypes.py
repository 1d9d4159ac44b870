# move_demos/core/datatypes.py
"""
Core data structures shared by the demo flows: entry function payloads,
typed call arguments and token identifiers.
"""
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Union

from aptos_sdk.account_address import AccountAddress
from aptos_sdk.bcs import Serializer
from aptos_sdk.transactions import EntryFunction, TransactionArgument, TransactionPayload
from aptos_sdk.type_tag import StructTag, TypeTag

U64_MAX = 18_446_744_073_709_551_615

APTOS_COIN = "0x1::aptos_coin::AptosCoin"

# Move types understood by TypedArg
ADDRESS = "address"
BOOL = "bool"
U8 = "u8"
U64 = "u64"
STRING = "0x1::string::String"
VECTOR_BOOL = "vector<bool>"
VECTOR_STRING = "vector<0x1::string::String>"
VECTOR_BYTES = "vector<vector<u8>>"


def normalize_address(value: Union[str, AccountAddress]) -> str:
    """
    Returns the long form (0x + 64 lowercase hex digits) of an address.

    Raises:
        ValueError: If the value is not a hex address of at most 32 bytes.
    """
    if isinstance(value, AccountAddress):
        value = str(value)
    text = str(value).strip().lower()
    if text.startswith("0x"):
        text = text[2:]
    if not text or len(text) > 64:
        raise ValueError(f"Invalid account address: {value!r}")
    try:
        int(text, 16)
    except ValueError:
        raise ValueError(f"Invalid account address: {value!r}") from None
    return f"0x{text.zfill(64)}"


def _encode_address(value: Union[str, AccountAddress]) -> AccountAddress:
    if isinstance(value, AccountAddress):
        return value
    return AccountAddress.from_str(normalize_address(value))


_ENCODERS: Dict[str, Callable] = {
    BOOL: Serializer.bool,
    U8: Serializer.u8,
    U64: Serializer.u64,
    STRING: Serializer.str,
    VECTOR_BOOL: Serializer.sequence_serializer(Serializer.bool),
    VECTOR_STRING: Serializer.sequence_serializer(Serializer.str),
    VECTOR_BYTES: Serializer.sequence_serializer(Serializer.to_bytes),
}


@dataclass(frozen=True)
class TypedArg:
    """A call argument together with the Move type it is encoded as."""
    move_type: str
    value: Any

    def to_transaction_argument(self) -> TransactionArgument:
        if self.move_type == ADDRESS:
            return TransactionArgument(_encode_address(self.value), Serializer.struct)
        encoder = _ENCODERS.get(self.move_type)
        if encoder is None:
            raise ValueError(f"Unsupported Move argument type: {self.move_type}")
        return TransactionArgument(self.value, encoder)


def address(value: Union[str, AccountAddress]) -> TypedArg:
    return TypedArg(ADDRESS, normalize_address(value))


def string(value: str) -> TypedArg:
    return TypedArg(STRING, value)


def u8(value: int) -> TypedArg:
    return TypedArg(U8, int(value))


def u64(value: int) -> TypedArg:
    return TypedArg(U64, int(value))


def boolean(value: bool) -> TypedArg:
    return TypedArg(BOOL, bool(value))


@dataclass
class EntryFunctionPayload:
    """
    The (function, type_arguments, arguments) triple submitted to the network.

    `function` is the fully-qualified `<address>::<module>::<function>` id.
    Construction never touches the network; `to_transaction_payload` hands
    the triple to the SDK for BCS encoding.
    """
    function: str
    type_arguments: List[str] = field(default_factory=list)
    arguments: List[TypedArg] = field(default_factory=list)

    @property
    def module_id(self) -> str:
        return self.function.rsplit("::", 1)[0]

    @property
    def function_name(self) -> str:
        return self.function.rsplit("::", 1)[1]

    def values(self) -> List[Any]:
        return [arg.value for arg in self.arguments]

    def signature(self) -> List[str]:
        return [arg.move_type for arg in self.arguments]

    def to_transaction_payload(self) -> TransactionPayload:
        if self.function.count("::") != 2:
            raise ValueError(f"Malformed function id: {self.function}")
        type_args = [TypeTag(StructTag.from_str(t)) for t in self.type_arguments]
        args = [arg.to_transaction_argument() for arg in self.arguments]
        return TransactionPayload(
            EntryFunction.natural(self.module_id, self.function_name, type_args, args)
        )


@dataclass(frozen=True)
class TokenDataId:
    creator: str
    collection: str
    name: str


@dataclass(frozen=True)
class TokenId:
    token_data_id: TokenDataId
    property_version: int = 0

    def to_table_key(self) -> Dict[str, Any]:
        """Key of this token in the owner's 0x3::token::TokenStore table."""
        return {
            "token_data_id": {
                "creator": normalize_address(self.token_data_id.creator),
                "collection": self.token_data_id.collection,
                "name": self.token_data_id.name,
            },
            "property_version": str(self.property_version),
        }
