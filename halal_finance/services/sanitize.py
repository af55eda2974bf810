"""Input sanitization for calculator requests.

Form fields arrive as strings, numbers or nothing at all. Anything that is not
a finite number becomes 0 and negatives are clamped to 0, so the engines only
ever see clean values.
"""
import math

from halal_finance.constants import DEFAULT_GOLD_PRICE_PER_TEN_GRAMS
from halal_finance.services.zakat import ZakatInput
from halal_finance.services.inheritance import HeirCounts, InheritanceInput


def parse_amount(value) -> float:
    """Parse a monetary amount or weight. Invalid or negative values become 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, str):
        value = value.strip().replace(',', '')
    try:
        amount = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0.0
    if not math.isfinite(amount) or amount < 0:
        return 0.0
    return amount


def parse_count(value) -> int:
    """Parse a head count. Fractions are truncated, invalid values become 0."""
    return int(parse_amount(value))


def parse_presence(value) -> int:
    """Parse a presence flag (spouse, father, mother) into 0 or 1."""
    if isinstance(value, bool):
        return int(value)
    return 1 if parse_count(value) > 0 else 0


def parse_gold_price(value, fallback: float = DEFAULT_GOLD_PRICE_PER_TEN_GRAMS) -> float:
    """Parse a gold price per 10 grams; non-positive prices use the fallback."""
    price = parse_amount(value)
    return price if price > 0 else fallback


def zakat_input_from_mapping(data: dict, gold_price_per_ten_grams: float) -> ZakatInput:
    """Build a ZakatInput from a raw request mapping."""
    return ZakatInput(
        gold_grams=parse_amount(data.get('gold_grams')),
        silver_grams=parse_amount(data.get('silver_grams')),
        cash=parse_amount(data.get('cash')),
        investments=parse_amount(data.get('investments')),
        debts=parse_amount(data.get('debts')),
        gold_price_per_ten_grams=parse_gold_price(gold_price_per_ten_grams),
    )


def heir_counts_from_mapping(data: dict) -> HeirCounts:
    return HeirCounts(
        spouse=parse_presence(data.get('spouse')),
        sons=parse_count(data.get('sons')),
        daughters=parse_count(data.get('daughters')),
        father=parse_presence(data.get('father')),
        mother=parse_presence(data.get('mother')),
    )


def inheritance_input_from_mapping(data: dict) -> InheritanceInput:
    """Build an InheritanceInput from a raw request mapping.

    Heirs may be nested under ``heirs`` or given at the top level.
    """
    heirs = data.get('heirs')
    if not isinstance(heirs, dict):
        heirs = data
    return InheritanceInput(
        total_wealth=parse_amount(data.get('total_wealth')),
        debts=parse_amount(data.get('debts')),
        heirs=heir_counts_from_mapping(heirs),
    )
