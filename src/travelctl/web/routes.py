"""HTTP routes: pages, form posts, and JSON endpoints.

Form posts redirect back to ``/?username=...`` on success and re-render
the index page with the result's message on failure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from flask import Blueprint, current_app, jsonify, redirect, render_template, request, url_for

from travelctl.services.base import STORAGE_FAILURE
from travelctl.services.tracker import TrackerService
from travelctl.web import EXTENSION_KEY

if TYPE_CHECKING:
    from flask.typing import ResponseReturnValue

    from travelctl.services.result import ServiceResult

bp = Blueprint("tracker", __name__)


def _service() -> TrackerService:
    return TrackerService(current_app.extensions[EXTENSION_KEY])


def _username() -> str:
    return (request.args.get("username") or "").strip()


def _home(username: str) -> ResponseReturnValue:
    return redirect(url_for("tracker.index", username=username))


def _render_index(username: str, error: str | None = None) -> ResponseReturnValue:
    listing = _service().list_visited()
    items = listing.data.get("items", []) if listing.ok else []
    if error is None and not listing.ok and listing.error is not None:
        error = listing.error.message
    return render_template(
        "index.html",
        countries=items,
        total=len(items),
        username=username,
        error=error,
    )


def _error_message(result: ServiceResult) -> str:
    return result.error.message if result.error else "An error occurred, try again"


# ── Pages ─────────────────────────────────────────────────────────────


@bp.get("/")
def index() -> ResponseReturnValue:
    username = _username()
    if not username:
        return redirect(url_for("tracker.login"))
    return _render_index(username)


@bp.get("/login")
def login() -> ResponseReturnValue:
    return render_template("login.html")


@bp.post("/login")
def login_submit() -> ResponseReturnValue:
    username = (request.form.get("username") or "").strip()
    if not username:
        return redirect(url_for("tracker.login"))
    return _home(username)


# ── Form posts ────────────────────────────────────────────────────────


@bp.post("/add")
def add() -> ResponseReturnValue:
    username = _username()
    result = _service().add_country(request.form.get("country"))
    if result.ok:
        return _home(username)
    return _render_index(username, error=_error_message(result))


@bp.post("/delete-country")
def delete_country() -> ResponseReturnValue:
    username = _username()
    result = _service().remove_country(request.form.get("country_code"))
    if result.ok:
        return _home(username)
    if result.error is not None and result.error.code == STORAGE_FAILURE:
        return _render_index(username, error="Failed to delete country")
    return _render_index(username, error=_error_message(result))


# ── JSON endpoints ────────────────────────────────────────────────────


@bp.get("/autocomplete")
def autocomplete() -> ResponseReturnValue:
    result = _service().suggest(request.args.get("q"))
    if not result.ok:
        return jsonify([])
    return jsonify(result.data["items"])


@bp.get("/get-visited-countries")
def get_visited_countries() -> ResponseReturnValue:
    result = _service().list_visited()
    if not result.ok:
        return jsonify({"error": "Failed to fetch visited countries"}), 500
    return jsonify(
        [
            {"country_code": item["code"], "country_name": item["name"]}
            for item in result.data["items"]
        ]
    )


@bp.post("/reset")
def reset() -> ResponseReturnValue:
    result = _service().reset()
    if not result.ok:
        return jsonify({"error": _error_message(result)}), 500
    return jsonify({"message": "Data reset successfully"})


@bp.get("/all-countries")
def all_countries() -> ResponseReturnValue:
    result = _service().list_countries()
    if not result.ok:
        return jsonify({"error": _error_message(result)}), 500
    return jsonify(
        [
            {"country_code": item["code"], "country_name": item["name"]}
            for item in result.data["items"]
        ]
    )


@bp.get("/health")
def health() -> ResponseReturnValue:
    return jsonify({"status": "healthy"}), 200
