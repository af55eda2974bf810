"""Gold price lookup with fallback.

The calculators never fetch prices themselves; routes and CLI commands resolve
a price here and pass it in.
"""
import logging
from dataclasses import dataclass, asdict

from halal_finance.constants import GOLD_PRICE_UNIT_GRAMS
from halal_finance.services.config import (
    get_gold_price_fallback,
    get_pricing_currency,
    is_network_enabled,
)
from halal_finance.services.providers import ProviderError
from halal_finance.services.providers.registry import get_metal_provider

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GoldPriceQuote:
    price_per_ten_grams: float
    currency: str
    source: str
    is_fallback: bool

    def to_dict(self) -> dict:
        return asdict(self)


def fallback_quote(currency: str | None = None) -> GoldPriceQuote:
    return GoldPriceQuote(
        price_per_ten_grams=get_gold_price_fallback(),
        currency=currency or get_pricing_currency(),
        source='fallback',
        is_fallback=True,
    )


def get_gold_price() -> GoldPriceQuote:
    """Return the live gold price per 10 grams, or the fallback constant."""
    currency = get_pricing_currency()

    if not is_network_enabled():
        return fallback_quote(currency)

    provider = get_metal_provider()
    if not provider.is_configured():
        return fallback_quote(currency)

    try:
        prices = provider.get_prices(currency)
    except ProviderError as e:
        logger.warning(f"Gold price fetch from {provider.name} failed: {e}")
        return fallback_quote(currency)

    for price in prices:
        if price.metal == 'gold' and price.price_per_gram > 0:
            return GoldPriceQuote(
                price_per_ten_grams=round(price.price_per_gram * GOLD_PRICE_UNIT_GRAMS, 2),
                currency=price.currency,
                source=price.source,
                is_fallback=False,
            )

    logger.warning(f"No gold price returned by {provider.name}, using fallback")
    return fallback_quote(currency)
