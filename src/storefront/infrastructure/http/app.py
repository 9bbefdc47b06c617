"""Flask application factory for the storefront order API."""

from __future__ import annotations

from flask import Flask, jsonify

from storefront.infrastructure.bootstrap import Repositories, json_repositories
from storefront.infrastructure.config import Settings, configure_logging
from storefront.infrastructure.http.cart_routes import cart
from storefront.infrastructure.http.context import EXTENSION_KEY
from storefront.infrastructure.http.errors import register_error_handlers
from storefront.infrastructure.http.order_routes import orders


def create_app(
    repos: Repositories | None = None,
    settings: Settings | None = None,
) -> Flask:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    app = Flask(__name__)
    app.extensions[EXTENSION_KEY] = repos or json_repositories(settings.data_dir)

    app.register_blueprint(orders)
    app.register_blueprint(cart)
    register_error_handlers(app)

    @app.get("/")
    def index():
        return jsonify({"message": "Storefront API", "status": "running"})

    return app
