"""Pluggable market data provider interface."""
from abc import ABC, abstractmethod
from dataclasses import dataclass, asdict
from typing import Optional


@dataclass
class MetalPrice:
    """Metal price data point."""
    metal: str              # gold, silver
    price_per_gram: float
    currency: str           # ISO 4217 code
    source: str


@dataclass
class StockQuote:
    """Last traded price for a listed equity."""
    symbol: str
    price: float
    change: float
    change_percent: float
    volume: int
    timestamp: str

    def to_dict(self) -> dict:
        return {
            'symbol': self.symbol,
            'price': self.price,
            'change': self.change,
            'changePercent': self.change_percent,
            'volume': self.volume,
            'timestamp': self.timestamp,
        }


@dataclass
class InstrumentMatch:
    """Equity instrument returned by a search."""
    symbol: str
    name: str
    exchange: str
    instrument_key: str
    isin: Optional[str]

    def to_dict(self) -> dict:
        data = asdict(self)
        data['instrumentKey'] = data.pop('instrument_key')
        return data


class MetalProvider(ABC):
    """Abstract base for metal price providers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider identifier."""
        pass

    @property
    @abstractmethod
    def requires_api_key(self) -> bool:
        """Whether this provider needs an API key."""
        pass

    @abstractmethod
    def is_configured(self) -> bool:
        """Check if provider is properly configured (API key set if required)."""
        pass

    @abstractmethod
    def get_prices(self, currency: str) -> list[MetalPrice]:
        """Fetch current metal prices.

        Args:
            currency: ISO 4217 code to quote prices in

        Returns:
            List of MetalPrice objects

        Raises:
            ProviderError: If fetch fails
        """
        pass


class MarketDataProvider(ABC):
    """Abstract base for stock market data providers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider identifier."""
        pass

    @abstractmethod
    def is_configured(self) -> bool:
        """Check if provider is properly configured."""
        pass

    @abstractmethod
    def get_live_quotes(self, symbols: list[str]) -> list[StockQuote]:
        """Fetch last traded prices for the given instrument symbols."""
        pass

    @abstractmethod
    def search_instruments(self, query: str) -> list[InstrumentMatch]:
        """Search listed equities by name or trading symbol."""
        pass


class ProviderError(Exception):
    """Base exception for provider errors."""
    pass


class RateLimitError(ProviderError):
    """API rate limit exceeded."""
    pass


class AuthenticationError(ProviderError):
    """API key invalid or missing."""
    pass


class NetworkError(ProviderError):
    """Network connectivity issue."""
    pass
