"""Flask web interface over TrackerService.

The Tracker is passed into :func:`create_app` and kept on
``app.extensions``; routes build a TrackerService per request from it.
Usernames travel as a query parameter and are display labels only.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from flask import Flask

if TYPE_CHECKING:
    from travelctl.config.settings import TravelSettings
    from travelctl.infrastructure.tracker import Tracker

EXTENSION_KEY = "travelctl.tracker"


def create_app(tracker: Tracker, *, settings: TravelSettings | None = None) -> Flask:
    """Build the Flask app bound to *tracker*."""
    from travelctl.web.routes import bp

    app = Flask(__name__)
    app.config["SECRET_KEY"] = settings.web.secret_key if settings else "change-me-dev"
    app.extensions[EXTENSION_KEY] = tracker
    app.register_blueprint(bp)
    return app
