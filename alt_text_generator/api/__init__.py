"""
API Package

Blueprints for the /api routes. Every route is also served under /api/v1.
"""
