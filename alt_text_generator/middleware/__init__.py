"""
Middleware Package

Request hooks applied to every route of the application.
"""

from .request_filter import load_request_filter, is_allowed_uri_format

__all__ = ['load_request_filter', 'is_allowed_uri_format']
