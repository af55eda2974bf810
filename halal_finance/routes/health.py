"""Health check endpoint."""
from flask import Blueprint, jsonify

from halal_finance.services.providers.registry import get_provider_status

health_bp = Blueprint('health', __name__)


@health_bp.route('/healthz')
def healthz():
    """Return health status of the application."""
    return jsonify({'status': 'ok'})


@health_bp.route('/healthz/providers')
def healthz_providers():
    """Report which market data providers are configured."""
    return jsonify(get_provider_status())
