"""Metal price provider implementations."""
import json
import urllib.request
import urllib.error
from typing import Optional

from halal_finance.services.config import get_goldapi_key, get_user_agent
from . import MetalProvider, MetalPrice, RateLimitError, AuthenticationError, NetworkError


# Conversion constant: troy ounce to grams
TROY_OZ_TO_GRAMS = 31.1035


class GoldAPIProvider(MetalProvider):
    """GoldAPI.io provider - requires API key.

    Quotes gold and silver spot prices per troy ounce in the requested
    currency. Free tier: 300 requests/month.
    """

    BASE_URL = "https://www.goldapi.io/api"

    SYMBOL_MAP = {
        'XAU': 'gold',
        'XAG': 'silver',
    }

    def __init__(self, api_key: Optional[str] = None):
        self._api_key = api_key or get_goldapi_key()

    @property
    def name(self) -> str:
        return "goldapi"

    @property
    def requires_api_key(self) -> bool:
        return True

    def is_configured(self) -> bool:
        return bool(self._api_key)

    def get_prices(self, currency: str) -> list[MetalPrice]:
        """Fetch current gold and silver prices in the given currency."""
        if not self._api_key:
            raise AuthenticationError("API key not configured")

        prices = []
        currency = currency.upper()

        for symbol, metal in self.SYMBOL_MAP.items():
            url = f"{self.BASE_URL}/{symbol}/{currency}"
            try:
                req = urllib.request.Request(url, headers={
                    'User-Agent': get_user_agent(),
                    'x-access-token': self._api_key,
                })
                with urllib.request.urlopen(req, timeout=30) as response:
                    data = json.loads(response.read().decode('utf-8'))

                price_per_oz = data.get('price')
                if price_per_oz is not None:
                    prices.append(MetalPrice(
                        metal=metal,
                        price_per_gram=round(float(price_per_oz) / TROY_OZ_TO_GRAMS, 4),
                        currency=currency,
                        source=self.name,
                    ))

            except urllib.error.HTTPError as e:
                if e.code == 429:
                    raise RateLimitError("Rate limit exceeded")
                if e.code == 401:
                    raise AuthenticationError("Invalid API key")
                # Continue with other metals on other errors
                continue
            except urllib.error.URLError as e:
                raise NetworkError(f"Network error: {e.reason}")
            except (json.JSONDecodeError, TypeError, ValueError):
                continue

        return prices


class FallbackMetalProvider(MetalProvider):
    """Fallback provider that returns empty list."""

    @property
    def name(self) -> str:
        return "fallback"

    @property
    def requires_api_key(self) -> bool:
        return False

    def is_configured(self) -> bool:
        return True

    def get_prices(self, currency: str) -> list[MetalPrice]:
        """Return empty list - indicates no external prices available."""
        return []
