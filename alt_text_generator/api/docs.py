"""
API Documentation

Serves the OpenAPI description of the /api routes and the Swagger UI
under /api-docs.
"""

from flasgger import Swagger

DOCS_ROUTE = '/api-docs'

SWAGGER_CONFIG = {
    "headers": [],
    "specs": [
        {
            "endpoint": "apispec",
            "route": f"{DOCS_ROUTE}/apispec.json",
            "rule_filter": lambda rule: rule.rule.startswith('/api/'),
            "model_filter": lambda tag: True,
        }
    ],
    "static_url_path": f"{DOCS_ROUTE}/flasgger_static",
    "swagger_ui": True,
    "specs_route": f"{DOCS_ROUTE}/",
}


def init_api_docs(app, version):
    """
    Attach the Swagger UI and the generated spec to the application.

    The spec is built from the YAML block in each view's docstring.
    """
    template = {
        "info": {
            "title": "Alt Text Generator API",
            "description": "Scrapes image URLs from websites and generates alt text with AI models",
            "version": version,
        },
        "definitions": {
            "Error": {
                "type": "object",
                "properties": {"error": {"type": "string"}},
            }
        },
    }
    return Swagger(app, config=SWAGGER_CONFIG, template=template, merge=True)
