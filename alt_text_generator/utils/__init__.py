"""
Utilities Package

Contains the image-source extraction functions and small helpers shared by
the API endpoints and the server bootstrap.
"""

from .html_utils import extract_image_sources, is_image, resolve_image_url
from .helpers import validate_url, read_cert
from .logger import create_logger

__all__ = [
    'extract_image_sources',    # Ordered absolute image URLs from HTML
    'is_image',                 # Extension check on an attribute value
    'resolve_image_url',        # Relative to absolute URL conversion
    'validate_url',
    'read_cert',
    'create_logger',
]
