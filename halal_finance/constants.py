"""Shared constants for zakat and inheritance calculation."""

# Zakat rate (2.5%)
ZAKAT_RATE = 0.025

# Nisab thresholds (minimum wealth for zakat obligation)
NISAB_GOLD_GRAMS = 87.48
NISAB_SILVER_GRAMS = 612.36

# Silver is priced per gram, gold per 10 grams (local market convention)
DEFAULT_SILVER_PRICE_PER_GRAM = 85.0
GOLD_PRICE_UNIT_GRAMS = 10

# Used when the live gold price cannot be fetched
DEFAULT_GOLD_PRICE_PER_TEN_GRAMS = 6850.0
DEFAULT_PRICING_CURRENCY = 'INR'

# Fixed inheritance fractions (simplified model)
PARENT_FRACTION = 1 / 6
SPOUSE_FRACTION_WITH_CHILDREN = 1 / 8
SPOUSE_FRACTION_WITHOUT_CHILDREN = 1 / 4

# A son takes two units for every daughter's one
SON_UNITS = 2
DAUGHTER_UNITS = 1

# Heir category labels, in the order shares are computed
HEIR_FATHER = 'Father'
HEIR_MOTHER = 'Mother'
HEIR_SPOUSE = 'Spouse'
HEIR_DAUGHTERS = 'Daughters'
HEIR_SONS = 'Sons'

# Market data search
MIN_SEARCH_QUERY_LENGTH = 2
MAX_SEARCH_RESULTS = 20
EQUITY_EXCHANGES = ('NSE', 'BSE')
