from __future__ import annotations

from flask import Blueprint, abort, jsonify, request

from app.profiles.modules.client_profiles.service import delete_profile, get_public_profile, update_profile
from app.profiles.store import profile_store
from app.profiles.utils import parse_profile_payload

bp = Blueprint("client_profiles", __name__)


def _client_id() -> str:
    return request.args.get("clientId") or ""


def _json_response(payload: dict):
    try:
        return jsonify(payload)
    except (TypeError, ValueError):
        abort(500, description="Failed to encode response")


@bp.route("/user/profile", methods=["GET", "PATCH", "DELETE"], provide_automatic_options=False)
def client_profile():
    # HEAD is routed here implicitly alongside GET; it is not supported.
    if request.method == "GET":
        return get_client_profile()
    if request.method == "PATCH":
        return update_client_profile()
    if request.method == "DELETE":
        return delete_client_profile()
    abort(405, description="Method not allowed")


def get_client_profile():
    profile = get_public_profile(profile_store(), _client_id())
    if profile is None:
        abort(403, description="Forbidden")
    return _json_response(profile)


def update_client_profile():
    client_id = _client_id()
    if not client_id:
        abort(400, description="clientId is required")

    store = profile_store()
    if client_id not in store:
        abort(404, description="Client not found")

    candidate, error = parse_profile_payload(request.get_data(cache=False))
    if error:
        abort(400, description="Invalid JSON")

    updated = update_profile(store, client_id, candidate)
    if updated is None:
        # deleted between the lookup and the merge
        abort(404, description="Client not found")
    return _json_response(updated.to_dict())


def delete_client_profile():
    client_id = _client_id()
    if not client_id:
        abort(400, description="clientId is required")
    if not delete_profile(profile_store(), client_id):
        abort(404, description="Client not found")
    return "", 204
