"""
Request Filter Middleware

Hooks run around every request: request logging, URI format validation,
HTTP to HTTPS redirects and the /api/ to /api/v1/ redirect.
"""

import re
import time

from flask import g, redirect, request

ALLOWED_URI_FORMAT = re.compile(r'(?:http://)?(?:www\.)?(.*?)/(.+?)(?:/|\?|#|$|\n)')

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Content-Security-Policy": "default-src 'self'; upgrade-insecure-requests",
}

DOCS_PATH = '/api-docs'


def is_allowed_uri_format(url: str) -> bool:
    """Check a full request URL against the allowed URI pattern."""
    return ALLOWED_URI_FORMAT.search(url) is not None


def _request_target():
    """Path plus query string of the current request."""
    query = request.query_string.decode('utf-8', 'replace')
    return f"{request.path}?{query}" if query else request.path


def load_request_filter(app, logger):
    """
    Register the request filter hooks on the application.

    Args:
        app: Flask application
        logger: Logger used for request logging
    """
    logger.info('Loading request-filter...')

    @app.before_request
    def filter_request():
        g.start_time = time.monotonic()
        logger.info(f"HTTP(S) Request received: {request.method} {request.path}")

        full_url = f"{request.scheme}://{request.host}{_request_target()}"
        if not is_allowed_uri_format(full_url):
            logger.debug(f"Denying resource - Disallowed URI format: {full_url}")
            return 'Bad request. URI format not allowed.', 400

        if app.config.get('FORCE_HTTPS'):
            forwarded_proto = request.headers.get('X-Forwarded-Proto')
            if forwarded_proto and forwarded_proto != 'https':
                logger.debug(f"Redirecting proxy-forwarded request to HTTPS: {full_url}")
                return redirect(f"https://{request.host}{_request_target()}")
            if not forwarded_proto and request.scheme != 'https':
                logger.debug(f"Redirecting request to HTTPS: {full_url}")
                return redirect(f"https://{request.host}{_request_target()}")

        if request.path == '/api/':
            logger.debug("Redirecting /api/ to /api/v1/")
            return redirect(f"{request.scheme}://{request.host}/api/v1/")

        return None

    @app.after_request
    def log_response(response):
        for header, value in SECURITY_HEADERS.items():
            # Swagger UI relies on inline scripts
            if header == "Content-Security-Policy" and request.path.startswith(DOCS_PATH):
                continue
            response.headers.setdefault(header, value)

        started = g.get('start_time')
        elapsed_ms = (time.monotonic() - started) * 1000 if started else 0.0
        logger.info(
            f"{request.method} {request.path} -> {response.status_code} ({elapsed_ms:.1f}ms)"
        )
        return response

    logger.info('Request-filter loaded')
