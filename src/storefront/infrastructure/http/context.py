"""Access to the repositories bound to the running Flask app."""

from __future__ import annotations

from flask import current_app

from storefront.infrastructure.bootstrap import Repositories

EXTENSION_KEY = "storefront"


def repositories() -> Repositories:
    return current_app.extensions[EXTENSION_KEY]
