import logging
import uuid

from dotenv import load_dotenv
from flask import Flask, g
from werkzeug.exceptions import HTTPException

from app.profiles.config import load_config
from app.profiles.modules.client_profiles.api import bp as client_profiles_bp
from app.profiles.routes import bp as routes_bp
from app.profiles.store import ProfileStore, init_store

# Short messages for aborts that carry no description of their own.
_DEFAULT_MESSAGES = {
    400: "Bad request",
    403: "Forbidden",
    404: "Not found",
    405: "Method not allowed",
    500: "Internal server error",
}


def create_app(store: ProfileStore | None = None) -> Flask:
    load_dotenv()
    app = Flask(__name__)
    app.config.from_mapping(load_config())

    env = (app.config.get("ENV") or "").strip().lower()
    level = app.config.get("LOG_LEVEL") or "INFO"
    if env in ("prod", "production") and level == "DEBUG":
        level = "INFO"
    app.logger.setLevel(level)

    init_store(app, store)

    app.register_blueprint(routes_bp)
    app.register_blueprint(client_profiles_bp)

    @app.before_request
    def _assign_request_id():
        # per-request id for audit/log correlation
        g.request_id = uuid.uuid4().hex

    @app.errorhandler(HTTPException)
    def _err_http(e: HTTPException):  # type: ignore[no-redef]
        code = e.code or 500
        message = e.description
        if not message or message == type(e).description:
            message = _DEFAULT_MESSAGES.get(code, e.name)
        if code >= 500:
            app.logger.error("HTTP %s (request_id=%s): %s", code, getattr(g, "request_id", None), message)
        return f"{message}\n", code, {"Content-Type": "text/plain; charset=utf-8"}

    @app.errorhandler(Exception)
    def _err_500(e: Exception):  # type: ignore[no-redef]
        app.logger.exception("Unhandled 500 (request_id=%s)", getattr(g, "request_id", None))
        return f"{_DEFAULT_MESSAGES[500]}\n", 500, {"Content-Type": "text/plain; charset=utf-8"}

    logging.getLogger(__name__).info("create_app() complete; app ready to serve")

    return app
