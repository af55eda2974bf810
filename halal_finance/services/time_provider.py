"""Current-date source that tests can freeze.

Dates are UTC; the quote of the day and quote timestamps roll over at UTC
midnight.
"""
from datetime import date, datetime, timezone
from typing import Optional


class TimeProvider:
    """Provides today's UTC date, or a fixed date when frozen.

    Usage:
        TimeProvider.set_default(TimeProvider(frozen_date=date(2026, 1, 15)))
        get_today()  # 2026-01-15 until reset_default()
    """

    _instance: Optional['TimeProvider'] = None

    def __init__(self, frozen_date: Optional[date] = None):
        self._frozen_date = frozen_date

    def today(self) -> date:
        if self._frozen_date is not None:
            return self._frozen_date
        return datetime.now(timezone.utc).date()

    @classmethod
    def get_default(cls) -> 'TimeProvider':
        if cls._instance is None:
            cls._instance = TimeProvider()
        return cls._instance

    @classmethod
    def set_default(cls, provider: 'TimeProvider') -> None:
        cls._instance = provider

    @classmethod
    def reset_default(cls) -> None:
        cls._instance = None


def get_today(time_provider: Optional[TimeProvider] = None) -> date:
    """Today's UTC date from the given or default provider."""
    return (time_provider or TimeProvider.get_default()).today()
