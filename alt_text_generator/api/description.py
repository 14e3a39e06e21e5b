"""
Accessibility API Endpoints

This module contains the endpoint that generates alt text for an image.
"""

from flask import Blueprint, current_app, jsonify, request

from alt_text_generator.services.describer import DescriptionError
from alt_text_generator.utils.helpers import validate_url

# Create blueprint
description_bp = Blueprint('description', __name__, url_prefix='/api')


@description_bp.route('/accessibility/description', methods=['GET'])
@description_bp.route('/v1/accessibility/description', methods=['GET'])
def describe_image():
    """
    Return a description for a given image.

    The image is downloaded, converted into a data URL and sent to the
    selected AI model.

    ---
    tags:
      - accessibility
    parameters:
      - name: image_source
        in: query
        type: string
        required: true
        description: URL-encoded address of the image
      - name: model
        in: query
        type: string
        required: true
        enum: [clip, gpt]
        description: Model used for the description
    responses:
      200:
        description: The generated alt text
        schema:
          type: array
          items:
            type: object
            properties:
              description:
                type: string
              imageUrl:
                type: string
      400:
        description: Missing or invalid parameters, or unsupported model
        schema:
          $ref: "#/definitions/Error"
      500:
        description: The description could not be generated
        schema:
          $ref: "#/definitions/Error"
    """
    logger = current_app.extensions['logger']
    describers = current_app.extensions['describers']

    image_source = request.args.get('image_source', '').strip()
    model = request.args.get('model', '').strip()
    logger.debug(f"Model: {model}, imageSource: {image_source}")

    if not model or not validate_url(image_source):
        return jsonify({
            "error": "Missing or invalid required query parameter(s): image_source and model are required."
        }), 400

    describer = describers.get(model)
    if describer is None:
        return jsonify({"error": f"Unsupported model: {model}"}), 400

    try:
        descriptions = describer.describe_image(image_source)
    except DescriptionError as e:
        logger.error(f"Error trying to get a description from the {model} model: {e}")
        return jsonify({"error": "Error fetching description for the provided image"}), 500

    logger.info("Response sent with alt text.")
    return jsonify(descriptions)
