"""Provider registry and selection logic."""
from halal_finance.services.config import get_goldapi_key, get_provider_keys_status
from . import MetalProvider, MarketDataProvider
from .metal_providers import GoldAPIProvider, FallbackMetalProvider
from .upstox import UpstoxProvider


def get_metal_provider() -> MetalProvider:
    """Get configured metal provider.

    Priority:
    1. GoldAPI (if key configured)
    2. Fallback (empty results)
    """
    if get_goldapi_key():
        return GoldAPIProvider()
    return FallbackMetalProvider()


def get_market_data_provider() -> MarketDataProvider:
    """Get the stock market data provider."""
    return UpstoxProvider()


def get_provider_status() -> dict:
    """Get status of all configured providers."""
    metal = get_metal_provider()
    market = get_market_data_provider()
    return {
        'metal': {
            'name': metal.name,
            'configured': metal.is_configured(),
        },
        'market_data': {
            'name': market.name,
            'configured': market.is_configured(),
        },
        'keys': get_provider_keys_status(),
    }
