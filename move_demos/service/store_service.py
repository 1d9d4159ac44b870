# move_demos/service/store_service.py
"""
Store demo modules: an admin-gated store, admin rotation and a per-user store.
"""

from aptos_sdk.account import Account

from ..config.settings import settings
from ..core.client import DemoClient
from ..core.datatypes import EntryFunctionPayload, address, normalize_address, u64


def admin_store_payload(module_address, amount: int, module_name: str = "learning02") -> EntryFunctionPayload:
    return EntryFunctionPayload(
        function=f"{normalize_address(module_address)}::{module_name}::admin_store",
        type_arguments=[],
        arguments=[u64(amount)],
    )


def set_admin_payload(module_address, new_admin, module_name: str = "learning02") -> EntryFunctionPayload:
    return EntryFunctionPayload(
        function=f"{normalize_address(module_address)}::{module_name}::set_admin_address",
        type_arguments=[],
        arguments=[address(new_admin)],
    )


def user_store_payload(module_address, amount: int, module_name: str = "learning07") -> EntryFunctionPayload:
    return EntryFunctionPayload(
        function=f"{normalize_address(module_address)}::{module_name}::user_store",
        type_arguments=[],
        arguments=[u64(amount)],
    )


class StoreClient(DemoClient):
    """All calls return the pending transaction hash without waiting."""

    def __init__(self, base_url: str, admin_module: str = None, user_module: str = None, **kwargs):
        super().__init__(base_url, **kwargs)
        self.admin_module = admin_module or settings.STORE_ADMIN_MODULE
        self.user_module = user_module or settings.STORE_USER_MODULE

    async def store(self, module: Account, signer: Account, amount: int) -> str:
        return await self.submit_payload(
            signer, admin_store_payload(module.address(), amount, self.admin_module)
        )

    async def set_admin(self, module: Account, signer: Account, new_admin: Account) -> str:
        return await self.submit_payload(
            signer, set_admin_payload(module.address(), new_admin.address(), self.admin_module)
        )

    async def user_store(self, module: Account, signer: Account, amount: int) -> str:
        return await self.submit_payload(
            signer, user_store_payload(module.address(), amount, self.user_module)
        )
