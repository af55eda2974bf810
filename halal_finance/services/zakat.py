"""Zakat calculation service.

The engine is a pure function of its input record and configuration: no I/O,
no shared state, no rounding. Callers sanitize raw input (see
``halal_finance.services.sanitize``) and supply the gold price.
"""
from dataclasses import dataclass, asdict

from halal_finance.constants import (
    ZAKAT_RATE,
    NISAB_GOLD_GRAMS,
    NISAB_SILVER_GRAMS,
    DEFAULT_SILVER_PRICE_PER_GRAM,
    GOLD_PRICE_UNIT_GRAMS,
)


@dataclass(frozen=True)
class ZakatConfig:
    """Rule parameters for the zakat engine."""
    silver_price_per_gram: float = DEFAULT_SILVER_PRICE_PER_GRAM
    nisab_gold_grams: float = NISAB_GOLD_GRAMS
    nisab_silver_grams: float = NISAB_SILVER_GRAMS
    zakat_rate: float = ZAKAT_RATE

    def to_dict(self) -> dict:
        return asdict(self)


DEFAULT_ZAKAT_CONFIG = ZakatConfig()


@dataclass(frozen=True)
class ZakatInput:
    """Asset holdings for a single zakat calculation."""
    gold_grams: float = 0.0
    silver_grams: float = 0.0
    cash: float = 0.0
    investments: float = 0.0
    debts: float = 0.0
    gold_price_per_ten_grams: float = 0.0


@dataclass(frozen=True)
class ZakatResult:
    """Derived zakat figures."""
    gold_value: float
    silver_value: float
    total_wealth: float
    nisab_threshold: float
    zakat_due: float

    @property
    def above_nisab(self) -> bool:
        return self.total_wealth >= self.nisab_threshold

    def to_dict(self) -> dict:
        return asdict(self)


def gold_value(grams: float, price_per_ten_grams: float) -> float:
    """Value of gold priced per 10 grams."""
    return grams * price_per_ten_grams / GOLD_PRICE_UNIT_GRAMS


def nisab_threshold(gold_price_per_ten_grams: float, config: ZakatConfig = DEFAULT_ZAKAT_CONFIG) -> float:
    """Return the lower of the gold-based and silver-based nisab values."""
    gold_nisab = gold_value(config.nisab_gold_grams, gold_price_per_ten_grams)
    silver_nisab = config.nisab_silver_grams * config.silver_price_per_gram
    return min(gold_nisab, silver_nisab)


def compute_zakat(zakat_input: ZakatInput, config: ZakatConfig = DEFAULT_ZAKAT_CONFIG) -> ZakatResult:
    """Calculate zakat due on the given holdings.

    Args:
        zakat_input: Sanitized holdings (all amounts >= 0, gold price > 0)
        config: Silver price, nisab gram weights and zakat rate

    Returns:
        ZakatResult. ``total_wealth`` is negative when debts exceed assets,
        in which case ``zakat_due`` is 0.
    """
    gold = gold_value(zakat_input.gold_grams, zakat_input.gold_price_per_ten_grams)
    silver = zakat_input.silver_grams * config.silver_price_per_gram

    total = (
        gold +
        silver +
        zakat_input.cash +
        zakat_input.investments -
        zakat_input.debts
    )

    threshold = nisab_threshold(zakat_input.gold_price_per_ten_grams, config)
    zakat = total * config.zakat_rate if total >= threshold else 0.0

    return ZakatResult(
        gold_value=gold,
        silver_value=silver,
        total_wealth=total,
        nisab_threshold=threshold,
        zakat_due=zakat,
    )
