"""
HTTP API

Flask-RESTX blueprints exposing the application services.
"""
