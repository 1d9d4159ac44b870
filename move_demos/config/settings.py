# move_demos/config/settings.py

import logging
import re
import sys
from typing import Optional

import coloredlogs
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# ANSI color codes
GREEN = "\033[92m"
YELLOW = "\033[93m"
RESET = "\033[0m"

# Transaction hashes and long-form addresses are both 64 hex chars
HEX_ID_REGEX = re.compile(r"(\b0x[a-fA-F0-9]{64}\b)")
BANNER_REGEX = re.compile(r"(=== .+? ===)")

NETWORK_NODE_URLS = {
    "mainnet": "https://fullnode.mainnet.aptoslabs.com/v1",
    "testnet": "https://fullnode.testnet.aptoslabs.com/v1",
    "devnet": "https://fullnode.devnet.aptoslabs.com/v1",
    "local": "http://localhost:8080/v1",
}
NETWORK_FAUCET_URLS = {
    "testnet": "https://faucet.testnet.aptoslabs.com",
    "devnet": "https://faucet.devnet.aptoslabs.com",
    "local": "http://localhost:8081",
}


class HighlightFormatter(coloredlogs.ColoredFormatter):
    """Custom formatter to highlight step banners and hex hashes/addresses."""

    def format(self, record):
        formatted_message = super().format(record)
        try:
            formatted_message = BANNER_REGEX.sub(
                lambda m: f"{GREEN}{m.group(1)}{RESET}", formatted_message
            )
            formatted_message = HEX_ID_REGEX.sub(
                lambda m: f"{YELLOW}{m.group(1)}{RESET}", formatted_message
            )
        except re.error as format_err:
            logging.getLogger().debug(f"Error in HighlightFormatter: {format_err}")
        return formatted_message


class Settings(BaseSettings):
    """
    Central configuration for the demo flows, loaded from environment
    variables or a .env file.
    """

    model_config = SettingsConfigDict(
        extra="ignore",
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MOVE_DEMOS_",
        populate_by_name=True,
    )

    # --- Network endpoints ---
    APTOS_NODE_URL: str = Field(
        default=NETWORK_NODE_URLS["devnet"],
        alias="APTOS_NODE_URL",
        description="Aptos fullnode REST URL or network name (devnet/testnet/mainnet/local)",
    )
    APTOS_FAUCET_URL: str = Field(
        default=NETWORK_FAUCET_URLS["devnet"],
        alias="APTOS_FAUCET_URL",
        description="Aptos faucet URL or network name",
    )

    # --- Role keys (hex encoded ed25519 private keys) ---
    DEV_PRIVATE_KEY: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("DEV_PRIVATE_KEY", "PRIVATE_KEY"),
        description="Operator key: deploys the modules, owns market and collection",
    )
    SELLER_PRIVATE_KEY: Optional[str] = Field(None, alias="SELLER_PRIVATE_KEY")
    BUYER_PRIVATE_KEY: Optional[str] = Field(None, alias="BUYER_PRIVATE_KEY")
    PRIVATE_KEY_ALICE: Optional[str] = Field(None, alias="PRIVATE_KEY_ALICE")
    PRIVATE_KEY_BOB: Optional[str] = Field(None, alias="PRIVATE_KEY_BOB")

    # --- Deployed module names ---
    MARKET_MODULE: str = Field(default="marketplace01", alias="MARKET_MODULE")
    COIN_MODULE: str = Field(default="LugonToken01", alias="COIN_MODULE")
    COIN_STRUCT: str = Field(default="LUS", alias="COIN_STRUCT")
    CREATOR_COIN_MODULE: str = Field(default="token05", alias="CREATOR_COIN_MODULE")
    STORE_ADMIN_MODULE: str = Field(default="learning02", alias="STORE_ADMIN_MODULE")
    STORE_USER_MODULE: str = Field(default="learning07", alias="STORE_USER_MODULE")

    LOG_LEVEL: str = Field(
        default="INFO",
        alias="LOG_LEVEL",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    @field_validator("APTOS_NODE_URL", mode="before")
    def validate_node_url(cls, value: Optional[str]):
        if value is None or not str(value).strip():
            return NETWORK_NODE_URLS["devnet"]

        value_str = str(value).strip()
        if value_str.lower() in NETWORK_NODE_URLS:
            return NETWORK_NODE_URLS[value_str.lower()]

        # The Python SDK expects the versioned API root
        value_str = value_str.rstrip("/")
        if not value_str.endswith("/v1"):
            value_str = f"{value_str}/v1"
        return value_str

    @field_validator("APTOS_FAUCET_URL", mode="before")
    def validate_faucet_url(cls, value: Optional[str]):
        if value is None or not str(value).strip():
            return NETWORK_FAUCET_URLS["devnet"]

        value_str = str(value).strip()
        if value_str.lower() in NETWORK_FAUCET_URLS:
            return NETWORK_FAUCET_URLS[value_str.lower()]
        return value_str.rstrip("/")

    @field_validator(
        "DEV_PRIVATE_KEY",
        "SELLER_PRIVATE_KEY",
        "BUYER_PRIVATE_KEY",
        "PRIVATE_KEY_ALICE",
        "PRIVATE_KEY_BOB",
        mode="before",
    )
    def blank_key_is_unset(cls, value: Optional[str]):
        if value is None:
            return None
        value_str = str(value).strip()
        return value_str or None


settings = Settings()  # type: ignore

# --- LOGGING CONFIGURATION ---
log_level_str = settings.LOG_LEVEL.upper()
if log_level_str not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
    log_level_str = "INFO"
LOG_LEVEL_CONFIG = getattr(logging, log_level_str)

DEFAULT_LEVEL_STYLES = {
    "debug": {"color": "green"},
    "info": {"color": "cyan"},
    "warning": {"color": "yellow"},
    "error": {"color": "red"},
    "critical": {"bold": True, "color": "red"},
}
DEFAULT_FIELD_STYLES = {
    "asctime": {"color": "magenta"},
    "levelname": {"bold": True, "color": "blue"},
    "name": {"color": "white"},
}
DEFAULT_FMT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

highlight_formatter = HighlightFormatter(
    fmt=DEFAULT_FMT,
    level_styles=DEFAULT_LEVEL_STYLES,
    field_styles=DEFAULT_FIELD_STYLES,
)

coloredlogs.install(
    level=LOG_LEVEL_CONFIG,
    fmt=DEFAULT_FMT,
    level_styles=DEFAULT_LEVEL_STYLES,
    field_styles=DEFAULT_FIELD_STYLES,
    reconfigure=True,
)
# coloredlogs falls back to a plain formatter when stderr is not a terminal
if sys.stderr.isatty():
    for handler in logging.getLogger().handlers:
        handler.setFormatter(highlight_formatter)

# httpx logs every request at INFO
logging.getLogger("httpx").setLevel(logging.WARNING)

logger = logging.getLogger("move_demos")
logger.debug(f"Settings loaded. Log level set to {logging.getLevelName(LOG_LEVEL_CONFIG)}.")
