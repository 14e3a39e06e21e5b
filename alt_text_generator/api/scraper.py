"""
Scraper API Endpoints

This module contains the endpoint that lists the images found on a website.
"""

from flask import Blueprint, current_app, jsonify, request

from alt_text_generator.utils.helpers import validate_url

# Create blueprint
scraper_bp = Blueprint('scraper', __name__, url_prefix='/api')


@scraper_bp.route('/scrapper/images', methods=['GET'])
@scraper_bp.route('/v1/scrapper/images', methods=['GET'])
def scrape_images():
    """
    Return the list of images found in a website.

    The page is fetched, its <img> elements are inspected and the image
    URLs are returned as absolute URLs in document order.

    ---
    tags:
      - scrapper
    parameters:
      - name: url
        in: query
        type: string
        required: true
        description: URL-encoded address of the website
    responses:
      200:
        description: Image URLs in document order
        schema:
          type: object
          properties:
            imageSources:
              type: array
              items:
                type: string
      400:
        description: Missing or invalid url parameter
        schema:
          $ref: "#/definitions/Error"
      500:
        description: The website could not be fetched
        schema:
          $ref: "#/definitions/Error"
    """
    logger = current_app.extensions['logger']
    scraper = current_app.extensions['web_scraper']

    request_url = request.args.get('url', '').strip()
    logger.debug(f"Queried URL: {request_url}")

    if not validate_url(request_url):
        return jsonify({"error": "Missing or invalid required query parameter: url"}), 400

    images = scraper.get_images(request_url)
    if images is None:
        return jsonify({"error": "Error fetching images from the provided URL"}), 500

    logger.debug(f"Response sent with {len(images['imageSources'])} images")
    return jsonify(images)
