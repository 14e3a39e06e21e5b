"""
Ping API Endpoint

This module contains the liveness check endpoint.
"""

from flask import Blueprint

# Create blueprint
ping_bp = Blueprint('ping', __name__, url_prefix='/api')


@ping_bp.route('/ping', methods=['GET'])
@ping_bp.route('/v1/ping', methods=['GET'])
def ping():
    """
    Check if the API is online and listening.
    ---
    tags:
      - ping
    produces:
      - text/plain
    responses:
      200:
        description: The API is up
        schema:
          type: string
          example: pong
    """
    return 'pong', 200, {'Content-Type': 'text/plain; charset=utf-8'}
