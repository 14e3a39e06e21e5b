"""
Server Functions

Helpers used by server.py to run the WSGI app over HTTP and HTTPS and to
stop both servers on SIGTERM/SIGINT.
"""

import signal
import threading

from werkzeug.serving import make_server

from alt_text_generator.utils.helpers import read_cert


def create_http_server(app, host, port):
    return make_server(host, port, app, threaded=True)


def create_https_server(app, host, port, config):
    """
    Create the HTTPS server using the configured certificate and key.

    Raises:
        FileNotFoundError: If the certificate files cannot be found
    """
    cert_path = read_cert(config.TLS_CERT, config.TLS_CERT_PATH)
    key_path = read_cert(config.TLS_KEY, config.TLS_KEY_PATH)
    return make_server(host, port, app, threaded=True, ssl_context=(cert_path, key_path))


def start_server(server, logger):
    """Serve requests on a background thread."""
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    logger.info(f"Server listening on port {server.port}")
    return thread


def graceful_shutdown(servers, logger):
    """
    Install SIGTERM/SIGINT handlers that stop every server.

    Returns:
        threading.Event: Set once the servers have been shut down
    """
    stopped = threading.Event()

    def shutdown(signum, _frame):
        logger.info(f"Received signal {signum}, shutting down...")
        for server in servers:
            server.shutdown()
            server.server_close()
        logger.info('Servers shut down gracefully.')
        stopped.set()

    for sig in (signal.SIGTERM, signal.SIGINT):
        signal.signal(sig, shutdown)

    return stopped
