"""
Web Scraper Service

This module fetches web pages and extracts the images they reference.
"""

import logging
from typing import Dict, List, Optional

import requests

from alt_text_generator.utils.html_utils import extract_image_sources


class WebScraper:
    """Service class for scraping image URLs from a website."""

    def __init__(self, logger: logging.Logger, timeout: float = 15, user_agent: str = None):
        self.logger = logger
        self.timeout = timeout
        self.user_agent = user_agent

    def fetch_html(self, target_url: str) -> Optional[str]:
        """
        Fetch the HTML content of a website.

        Args:
            target_url: URL of the website

        Returns:
            The HTML content, or None if the request failed
        """
        headers = {"Origin": target_url}
        if self.user_agent:
            headers["User-Agent"] = self.user_agent

        try:
            response = requests.get(target_url, headers=headers, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            self.logger.error(f"Error fetching the website {target_url}: {e}")
            return None

        return response.text

    def extract_image_sources(self, html: str, target_url: str) -> List[str]:
        """Extract absolute image URLs from already fetched HTML."""
        return extract_image_sources(html, target_url)

    def get_images(self, target_url: str) -> Optional[Dict[str, List[str]]]:
        """
        Scrape images from a website.

        Args:
            target_url: URL of the website

        Returns:
            Dict with an "imageSources" list, or None if fetching failed
        """
        html = self.fetch_html(target_url)
        if html is None:
            return None

        image_sources = self.extract_image_sources(html, target_url)
        self.logger.info(f"Images: {image_sources}")
        return {"imageSources": image_sources}
