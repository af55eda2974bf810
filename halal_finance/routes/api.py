"""API routes for calculators, pricing and market data."""
import math
from datetime import datetime, timezone
from flask import Blueprint, jsonify, request, current_app

from halal_finance.constants import MIN_SEARCH_QUERY_LENGTH
from halal_finance.data.quotes import get_all_quotes, get_quote_of_the_day
from halal_finance.services.config import get_zakat_config
from halal_finance.services.inheritance import compute_inheritance, DEFAULT_INHERITANCE_CONFIG
from halal_finance.services.pricing import get_gold_price
from halal_finance.services.providers import ProviderError, AuthenticationError
from halal_finance.services.providers.registry import get_market_data_provider, get_provider_status
from halal_finance.services.sanitize import (
    parse_amount,
    zakat_input_from_mapping,
    inheritance_input_from_mapping,
)
from halal_finance.services.time_provider import get_today
from halal_finance.services.zakat import compute_zakat

api_bp = Blueprint('api', __name__)


def _json_body():
    """Return the request body as a dict, or None if it is not a JSON object."""
    body = request.get_json(silent=True)
    if body is None:
        return {}
    if not isinstance(body, dict):
        return None
    return body


def _zakat_config():
    silver_price = current_app.config.get('SILVER_PRICE_PER_GRAM')
    return get_zakat_config(silver_price)


def _provider_error_response(e: ProviderError):
    if isinstance(e, AuthenticationError) and not get_market_data_provider().is_configured():
        return jsonify({'error': 'Upstox access token not configured'}), 500
    return jsonify({'error': 'Market data request failed', 'message': str(e)}), 502


@api_bp.route('/zakat', methods=['POST'])
def zakat():
    """Calculate zakat due on submitted holdings.

    Request body:
    {
        "gold_grams": 100,
        "silver_grams": 0,
        "cash": 25000,
        "investments": 0,
        "debts": 0,
        "gold_price_per_ten_grams": 6850   (optional, live price if omitted)
    }

    Non-numeric or negative amounts are treated as 0.
    """
    body = _json_body()
    if body is None:
        return jsonify({'error': 'Request body must be a JSON object'}), 400

    if parse_amount(body.get('gold_price_per_ten_grams')) > 0:
        gold_price = parse_amount(body['gold_price_per_ten_grams'])
        price_source = 'request'
    else:
        quote = get_gold_price()
        gold_price = quote.price_per_ten_grams
        price_source = quote.source

    config = _zakat_config()
    zakat_input = zakat_input_from_mapping(body, gold_price)
    result = compute_zakat(zakat_input, config)
    if not all(math.isfinite(value) for value in result.to_dict().values()):
        return jsonify({'error': 'Amounts are too large to calculate'}), 400

    return jsonify({
        **result.to_dict(),
        'above_nisab': result.above_nisab,
        'zakat_rate': config.zakat_rate,
        'gold_price_per_ten_grams': zakat_input.gold_price_per_ten_grams,
        'gold_price_source': price_source,
    })


@api_bp.route('/inheritance', methods=['POST'])
def inheritance():
    """Distribute a net estate among heirs.

    Request body:
    {
        "total_wealth": 1200000,
        "debts": 0,
        "heirs": {"spouse": 1, "sons": 2, "daughters": 1, "father": 0, "mother": 0}
    }

    Returns 422 when total wealth minus debts is not positive.
    """
    body = _json_body()
    if body is None:
        return jsonify({'error': 'Request body must be a JSON object'}), 400

    inheritance_input = inheritance_input_from_mapping(body)
    outcome = compute_inheritance(inheritance_input)
    if not outcome.ok:
        return jsonify(outcome.error.to_dict()), 422

    return jsonify({
        'total_wealth': inheritance_input.total_wealth,
        'debts': inheritance_input.debts,
        'heirs': inheritance_input.heirs.to_dict(),
        **outcome.result.to_dict(),
    })


@api_bp.route('/gold-price')
def gold_price():
    """Return the gold price per 10 grams used by the zakat calculator."""
    return jsonify(get_gold_price().to_dict())


@api_bp.route('/calculators/config')
def calculators_config():
    """Return the active calculator parameters and provider status."""
    return jsonify({
        'zakat': _zakat_config().to_dict(),
        'inheritance': DEFAULT_INHERITANCE_CONFIG.to_dict(),
        'providers': get_provider_status(),
    })


@api_bp.route('/stocks/live')
def stocks_live():
    """Return last traded prices.

    Query Parameters:
        symbols: Comma-separated instrument keys (required)
    """
    symbols = [s.strip() for s in request.args.get('symbols', '').split(',') if s.strip()]
    if not symbols:
        return jsonify({'error': 'Symbols parameter is required'}), 400

    try:
        quotes = get_market_data_provider().get_live_quotes(symbols)
    except ProviderError as e:
        current_app.logger.error(f"Error fetching live prices: {e}")
        return _provider_error_response(e)

    return jsonify({
        'success': True,
        'data': [q.to_dict() for q in quotes],
        'timestamp': datetime.now(timezone.utc).isoformat(),
    })


@api_bp.route('/stocks/search')
def stocks_search():
    """Search NSE/BSE equities.

    Query Parameters:
        q: Search text, at least 2 characters
    """
    query = request.args.get('q', '').strip()
    if len(query) < MIN_SEARCH_QUERY_LENGTH:
        return jsonify({'error': 'Search query must be at least 2 characters'}), 400

    try:
        matches = get_market_data_provider().search_instruments(query)
    except ProviderError as e:
        current_app.logger.error(f"Error searching stocks: {e}")
        return _provider_error_response(e)

    return jsonify({
        'success': True,
        'data': [m.to_dict() for m in matches],
        'query': query,
    })


@api_bp.route('/quotes/daily')
def daily_quote():
    """Return the quote of the day."""
    return jsonify(get_quote_of_the_day(get_today()))


@api_bp.route('/quotes')
def quotes():
    """Return every quote in rotation order."""
    all_quotes = get_all_quotes()
    return jsonify({'quotes': all_quotes, 'count': len(all_quotes)})
