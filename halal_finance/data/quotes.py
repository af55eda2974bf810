"""Islamic finance quotes shown alongside the calculators."""
from datetime import date

ISLAMIC_QUOTES = [
    {
        'text': 'Wealth is not in having vast riches, but in contentment.',
        'source': 'Prophet Muhammad (PBUH)',
    },
    {
        'text': 'Give charity without delay, for it stands in the way of calamity.',
        'source': 'Prophet Muhammad (PBUH)',
    },
    {
        'text': 'The best of people are those who are most beneficial to others.',
        'source': 'Islamic Teaching',
    },
    {
        'text': 'Trade with mutual consent is the lawful gain.',
        'source': 'Islamic Teaching',
    },
    {
        'text': 'And establish weight in justice and do not make deficient the balance.',
        'source': 'Quran 55:9',
    },
    {
        'text': 'Allah does not like the usurious debt.',
        'source': 'Quran 2:276',
    },
    {
        'text': 'O you who believe! Devour not usury, doubled and multiplied.',
        'source': 'Quran 3:130',
    },
    {
        'text': 'And whatever you give for increase within the wealth of people will not increase with Allah.',
        'source': 'Quran 30:39',
    },
]


def get_all_quotes() -> list[dict]:
    return [dict(quote) for quote in ISLAMIC_QUOTES]


def get_quote_of_the_day(day: date) -> dict:
    """Rotate through the quotes one per day."""
    index = day.toordinal() % len(ISLAMIC_QUOTES)
    return {**ISLAMIC_QUOTES[index], 'index': index, 'date': day.isoformat()}
