"""
Helper utilities for the scraper and description endpoints.

This module contains small functions for validating user supplied URLs and
reading TLS material for the development HTTPS server.
"""
import base64
import os
import tempfile
from urllib.parse import urlparse


def validate_url(url):
    """
    Check that a URL can be fetched by the service.

    Args:
        url (str): The URL to validate

    Returns:
        bool: True if the URL has an http(s) scheme and a host
    """
    if not url or not isinstance(url, str):
        return False
    try:
        parsed_url = urlparse(url.strip())
    except ValueError:
        return False
    return parsed_url.scheme in ('http', 'https') and bool(parsed_url.netloc)


def read_cert(env_value, default_path):
    """
    Locate a PEM file for the HTTPS server.

    When the environment supplies the certificate as base64 encoded text it
    is decoded into a temporary file, since the SSL layer only loads
    certificates from disk.

    Args:
        env_value (str): Base64 encoded PEM content, or None
        default_path (str): File to use when env_value is empty

    Returns:
        str: Path to the PEM file

    Raises:
        FileNotFoundError: If no env value is given and default_path is missing
    """
    if env_value:
        pem = base64.b64decode(env_value).decode('ascii')
        handle = tempfile.NamedTemporaryFile('w', suffix='.pem', delete=False)
        with handle:
            handle.write(pem)
        return handle.name

    if not os.path.isfile(default_path):
        raise FileNotFoundError(f"Certificate file not found: {default_path}")
    return default_path
