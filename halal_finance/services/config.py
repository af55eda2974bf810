"""Configuration service for pricing, market data and calculator settings."""
import logging
import math
import os

from halal_finance.constants import (
    DEFAULT_SILVER_PRICE_PER_GRAM,
    DEFAULT_GOLD_PRICE_PER_TEN_GRAMS,
    DEFAULT_PRICING_CURRENCY,
)
from halal_finance.services.zakat import ZakatConfig

logger = logging.getLogger(__name__)


def _get_float(name: str, default: float) -> float:
    """Read a positive price from the environment, falling back to the default."""
    raw = os.environ.get(name)
    if raw is None or raw.strip() == '':
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not a number")
        return default
    if not math.isfinite(value) or value <= 0:
        logger.warning(f"Ignoring {name}={raw!r}: must be a positive number")
        return default
    return value


def is_network_enabled() -> bool:
    """Check if outbound provider requests are allowed.

    Controlled by PRICING_ALLOW_NETWORK env var (default: 1/true).
    """
    return os.environ.get('PRICING_ALLOW_NETWORK', '1').lower() in ('1', 'true', 'yes')


def get_user_agent() -> str:
    """Get the User-Agent string for provider HTTP requests."""
    default_ua = 'HalalFinance/1.0'
    return os.environ.get('PRICING_SYNC_USER_AGENT', default_ua)


def get_pricing_currency() -> str:
    """Currency the gold price is quoted in (default: INR)."""
    return os.environ.get('PRICING_CURRENCY', DEFAULT_PRICING_CURRENCY).upper()


def get_silver_price_per_gram() -> float:
    """Silver price used for silver holdings and the silver nisab.

    Controlled by SILVER_PRICE_PER_GRAM env var (default: 85).
    """
    return _get_float('SILVER_PRICE_PER_GRAM', DEFAULT_SILVER_PRICE_PER_GRAM)


def get_gold_price_fallback() -> float:
    """Gold price per 10 grams used when no live price is available.

    Controlled by GOLD_PRICE_FALLBACK env var (default: 6850).
    """
    return _get_float('GOLD_PRICE_FALLBACK', DEFAULT_GOLD_PRICE_PER_TEN_GRAMS)


def get_zakat_config(silver_price_per_gram: float | None = None) -> ZakatConfig:
    """Build the zakat rule parameters from the environment."""
    if silver_price_per_gram is None:
        silver_price_per_gram = get_silver_price_per_gram()
    return ZakatConfig(silver_price_per_gram=silver_price_per_gram)


# Provider API key getters
def get_goldapi_key() -> str | None:
    """Get GoldAPI key if configured."""
    return os.environ.get('GOLDAPI_KEY')


def get_upstox_access_token() -> str | None:
    """Get Upstox access token if configured."""
    return os.environ.get('UPSTOX_ACCESS_TOKEN')


def get_provider_keys_status() -> dict:
    """Get status of configured provider API keys."""
    return {
        'goldapi': bool(get_goldapi_key()),
        'upstox': bool(get_upstox_access_token()),
    }
