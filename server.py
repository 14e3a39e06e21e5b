"""
Flask Server for the Alt Text Generator API

This is the main entry point for the Flask application.
The server provides REST API endpoints for:
1. Checking that the API is alive (/api/ping)
2. Listing the images found on a website (/api/scrapper/images)
3. Generating alt text for an image with AI models (/api/accessibility/description)

HTTP is served on PORT. Outside production an HTTPS server is started on
TLS_PORT as well, so the HTTPS redirect of the request filter can be
followed locally. In production TLS is expected to end at the proxy.
"""

import sys

from alt_text_generator import create_app
from alt_text_generator.config import Config
from alt_text_generator.serving import (
    create_http_server, create_https_server, graceful_shutdown, start_server
)
from alt_text_generator.utils.logger import create_logger

logger = create_logger('alt_text_generator', Config.log_level())

# Create Flask application using the application factory pattern
app = create_app(Config, logger=logger)


def main():
    try:
        Config.validate_env_vars()
    except ValueError as e:
        logger.error(str(e))
        return 1

    logger.info('Starting server...')
    servers = [create_http_server(app, Config.HOST, int(Config.PORT))]

    if not Config.is_production():
        try:
            servers.append(create_https_server(app, Config.HOST, int(Config.TLS_PORT), Config))
        except (OSError, ValueError) as e:
            logger.error(f"Server Initialization Error: {e}")
            return 1

    for server in servers:
        start_server(server, logger)
    stopped = graceful_shutdown(servers, logger)
    logger.info('Server started.')

    while not stopped.wait(1):
        pass
    return 0


if __name__ == '__main__':
    sys.exit(main())
