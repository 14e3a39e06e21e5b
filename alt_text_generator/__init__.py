"""
Flask Application Factory

This module creates and configures the Flask application with all necessary
components including CORS, the request filter, services, routes and error
handlers.
"""

from flask import Flask, jsonify, request
from flask_cors import CORS
from alt_text_generator.config import Config, ClientManager

__version__ = "1.0.0"


def create_app(config_class=Config, logger=None):
    """
    Application factory pattern for creating Flask app.

    Services are built here and stored in app.extensions so that routes
    and tests share the same instances.

    Args:
        config_class: Configuration class to use
        logger: Optional logger; one is created from the config if omitted

    Returns:
        Flask: Configured Flask application
    """
    from alt_text_generator.utils.logger import create_logger
    from alt_text_generator.middleware.request_filter import load_request_filter
    from alt_text_generator.services.scraper import WebScraper
    from alt_text_generator.services.describer import (
        OpenAIImageDescriber, ReplicateImageDescriber
    )

    app = Flask(__name__)
    app.config.from_object(config_class)

    if logger is None:
        logger = create_logger('alt_text_generator', config_class.log_level())

    # Initialize CORS
    CORS(app)

    load_request_filter(app, logger)

    # Services
    clients = ClientManager(config_class)
    fetch_options = {
        "fetch_timeout": config_class.FETCH_TIMEOUT_SECONDS,
        "user_agent": config_class.USER_AGENT,
        "max_image_bytes": config_class.MAX_IMAGE_BYTES,
    }
    app.extensions['logger'] = logger
    app.extensions['web_scraper'] = WebScraper(
        logger,
        timeout=config_class.FETCH_TIMEOUT_SECONDS,
        user_agent=config_class.USER_AGENT,
    )
    app.extensions['describers'] = {
        "clip": ReplicateImageDescriber(
            clients,
            logger,
            model_version=config_class.REPLICATE_MODEL_VERSION,
            poll_interval=config_class.REPLICATE_POLL_INTERVAL_SECONDS,
            timeout=config_class.REPLICATE_TIMEOUT_SECONDS,
            **fetch_options,
        ),
        "gpt": OpenAIImageDescriber(
            clients,
            logger,
            model=config_class.OPENAI_VISION_MODEL,
            **fetch_options,
        ),
    }

    # Register blueprints
    logger.info('Loading API routes...')
    from alt_text_generator.api.ping import ping_bp
    from alt_text_generator.api.scraper import scraper_bp
    from alt_text_generator.api.description import description_bp

    app.register_blueprint(ping_bp)
    app.register_blueprint(scraper_bp)
    app.register_blueprint(description_bp)
    logger.info('API routes loaded.')

    from alt_text_generator.api.docs import init_api_docs
    init_api_docs(app, __version__)

    @app.errorhandler(404)
    def not_found(error):
        if request.path == '/api' or request.path.startswith('/api/'):
            return jsonify({"error": "Endpoint not found"}), 404
        return error

    return app
