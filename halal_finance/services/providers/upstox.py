"""Upstox market data provider.

Thin proxy over the Upstox v2 REST API: last traded prices for watchlist
symbols and instrument search for NSE/BSE equities.
"""
import json
import urllib.error
import urllib.parse
import urllib.request
from datetime import datetime, timezone
from typing import Optional

from halal_finance.constants import EQUITY_EXCHANGES, MAX_SEARCH_RESULTS
from halal_finance.services.config import get_upstox_access_token, get_user_agent
from . import (
    MarketDataProvider,
    StockQuote,
    InstrumentMatch,
    ProviderError,
    RateLimitError,
    AuthenticationError,
    NetworkError,
)


# Instrument key prefixes stripped from quote symbols
SYMBOL_PREFIXES = ('NSE_EQ|INE', 'BSE_EQ|')


def clean_symbol(instrument: str) -> str:
    for prefix in SYMBOL_PREFIXES:
        instrument = instrument.replace(prefix, '')
    return instrument


def _number(value, default=0):
    return value if isinstance(value, (int, float)) and not isinstance(value, bool) else default


class UpstoxProvider(MarketDataProvider):
    """Upstox API provider - requires an access token."""

    BASE_URL = "https://api.upstox.com/v2"

    def __init__(self, access_token: Optional[str] = None):
        self._access_token = access_token or get_upstox_access_token()

    @property
    def name(self) -> str:
        return "upstox"

    def is_configured(self) -> bool:
        return bool(self._access_token)

    def _get_json(self, url: str) -> dict:
        if not self._access_token:
            raise AuthenticationError("Upstox access token not configured")

        req = urllib.request.Request(url, headers={
            'Authorization': f'Bearer {self._access_token}',
            'Accept': 'application/json',
            'User-Agent': get_user_agent(),
        })
        try:
            with urllib.request.urlopen(req, timeout=30) as response:
                return json.loads(response.read().decode('utf-8'))
        except urllib.error.HTTPError as e:
            if e.code == 429:
                raise RateLimitError("Rate limit exceeded")
            if e.code == 401:
                raise AuthenticationError("Invalid access token")
            raise ProviderError(f"Upstox API error: {e.code}")
        except urllib.error.URLError as e:
            raise NetworkError(f"Network error: {e.reason}")
        except json.JSONDecodeError:
            raise ProviderError("Invalid JSON response")

    def get_live_quotes(self, symbols: list[str]) -> list[StockQuote]:
        """Fetch last traded prices.

        Args:
            symbols: Upstox instrument keys, e.g. ``NSE_EQ|INE467B01029``

        Returns:
            One StockQuote per instrument in the response
        """
        query = urllib.parse.urlencode({'symbol': ','.join(symbols)}, safe=',|')
        data = self._get_json(f"{self.BASE_URL}/market-quote/ltp?{query}")

        timestamp = datetime.now(timezone.utc).isoformat()
        quotes = []
        for instrument, entry in (data.get('data') or {}).items():
            entry = entry or {}
            quotes.append(StockQuote(
                symbol=clean_symbol(instrument),
                price=_number(entry.get('last_price')),
                change=_number(entry.get('net_change')),
                change_percent=_number(entry.get('percent_change')),
                volume=_number(entry.get('volume')),
                timestamp=timestamp,
            ))
        return quotes

    def search_instruments(self, query: str) -> list[InstrumentMatch]:
        """Search NSE/BSE equities, capped at MAX_SEARCH_RESULTS."""
        encoded = urllib.parse.quote(query)
        data = self._get_json(f"{self.BASE_URL}/search/instruments?query={encoded}")

        matches = []
        for item in data.get('data') or []:
            if item.get('exchange') not in EQUITY_EXCHANGES:
                continue
            if item.get('instrument_type') != 'EQ':
                continue
            matches.append(InstrumentMatch(
                symbol=item.get('tradingsymbol'),
                name=item.get('name'),
                exchange=item.get('exchange'),
                instrument_key=item.get('instrument_key'),
                isin=item.get('isin'),
            ))
            if len(matches) >= MAX_SEARCH_RESULTS:
                break
        return matches
