from flask import jsonify, request
from werkzeug.exceptions import RequestEntityTooLarge

from tripboard.core.encoding import encode_base64
from tripboard.core.identity import parse_name_with_trip, sanitize_text
from tripboard.core.sha1 import sha1_digest
from tripboard.core.tripcode import TRIP_LENGTH, derive_tripcode
from tripboard.ui.constants import MAX_INPUT_KB


def _json_body():
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def _text_field(payload, key):
    value = payload.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(key)
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        raise ValueError(key)
    return value


def configure_routes(app, ui):
    @app.errorhandler(RequestEntityTooLarge)
    def handle_large_body(_err):
        return jsonify({"error": f"Request too large (max {MAX_INPUT_KB} KB)"}), 413

    @app.get("/api/state")
    def api_state():
        return jsonify(
            {
                "marker": ui.settings.marker,
                "placeholder": ui.settings.placeholder,
                "trip_length": TRIP_LENGTH,
            }
        )

    @app.post("/api/identity")
    def api_identity():
        payload = _json_body()
        try:
            raw = _text_field(payload, "name")
        except ValueError:
            return jsonify({"error": "Field 'name' must be a UTF-8 string"}), 400

        identity = parse_name_with_trip(
            raw,
            placeholder=ui.settings.placeholder,
            marker=ui.settings.marker,
        )
        if identity.trip:
            ui.emit(f"Derived trip {identity.trip} for {identity.name}")

        return jsonify(
            {
                "ok": True,
                "name": identity.name,
                "trip": identity.trip,
                "display": identity.display(),
                "author": identity.author_key(),
            }
        )

    @app.post("/api/tripcode")
    def api_tripcode():
        payload = _json_body()
        try:
            seed = sanitize_text(_text_field(payload, "seed"))
        except ValueError:
            return jsonify({"error": "Field 'seed' must be a UTF-8 string"}), 400

        if not seed:
            return jsonify({"error": "Seed is empty"}), 400

        return jsonify({"ok": True, "trip": f"{ui.settings.marker}{derive_tripcode(seed)}"})

    @app.post("/api/digest")
    def api_digest():
        payload = _json_body()
        try:
            text = _text_field(payload, "text")
        except ValueError:
            return jsonify({"error": "Field 'text' must be a UTF-8 string"}), 400

        digest = sha1_digest(text.encode("utf-8"))
        return jsonify({"ok": True, "hex": digest.hex(), "base64": encode_base64(digest)})
