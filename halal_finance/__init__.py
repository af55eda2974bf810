"""Flask application factory for the Halal Finance calculators."""
import logging
import os
from flask import Flask
from werkzeug.middleware.proxy_fix import ProxyFix


logger = logging.getLogger('halal_finance')


def create_app(config: dict | None = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        config: Optional configuration dictionary to override defaults.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__)

    # Trust X-Forwarded-For from reverse proxy
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1)

    # Default configuration
    app.config.update(
        SECRET_KEY=os.environ.get('SECRET_KEY', 'dev-secret-key-change-in-production'),
        JSON_SORT_KEYS=False,
        # Silver price per gram; None reads SILVER_PRICE_PER_GRAM from the environment
        SILVER_PRICE_PER_GRAM=None,
    )

    # Override with provided config
    if config:
        app.config.update(config)

    # Keep share order (Father, Mother, Spouse, Daughters, Sons) in responses
    app.json.sort_keys = app.config['JSON_SORT_KEYS']

    # Register CLI commands
    from halal_finance import cli
    cli.register_cli(app)

    # Register blueprints
    from halal_finance.routes.health import health_bp
    from halal_finance.routes.api import api_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(api_bp, url_prefix='/api/v1')

    logger.info('Halal Finance app created')
    return app
