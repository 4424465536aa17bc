"""API package wiring for the UI generation backend."""

from flask import Flask

from .generate import bp as generate_bp
from .prompts import bp as prompts_bp


def init_app(app: Flask) -> None:
    """Register all API blueprints on the given application."""

    app.register_blueprint(prompts_bp)
    app.register_blueprint(generate_bp)
