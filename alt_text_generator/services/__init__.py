"""
Services Package

Contains business logic and service classes for the application.
"""

from .scraper import WebScraper
from .describer import (
    DescriptionError,
    ImageDescriber,
    OpenAIImageDescriber,
    ReplicateImageDescriber,
)

__all__ = [
    'WebScraper',
    'DescriptionError',
    'ImageDescriber',
    'OpenAIImageDescriber',
    'ReplicateImageDescriber',
]
