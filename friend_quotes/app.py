"""Friend Quotes – main Flask application."""

import logging

from flask import Flask, redirect, url_for
from werkzeug.exceptions import InternalServerError

from . import config
from .content import ContentStore
from .rendering import NOT_FOUND_TEMPLATE, render_error_page, render_page

log = logging.getLogger(__name__)


def create_app(store: ContentStore | None = None, friends_file: str | None = None,
               per_page: int | None = None) -> Flask:
    """Build the app. Tests pass their own store and settings."""
    store = store or ContentStore()

    app = Flask(
        __name__,
        template_folder=str(store.template_dir),
        static_folder=None,
    )
    app.config["CONTENT_STORE"] = store
    app.config["FRIENDS_FILE"] = friends_file or config.FRIENDS_FILE
    app.config["FRIENDS_PER_PAGE"] = per_page or config.FRIENDS_PER_PAGE

    # -----------------------------------------------------------------------
    # Register blueprints
    # -----------------------------------------------------------------------
    from .blueprints.friends import friends_bp

    app.register_blueprint(friends_bp)

    # -----------------------------------------------------------------------
    # Security headers on every response
    # -----------------------------------------------------------------------
    @app.after_request
    def add_security_headers(resp):
        for name, value in config.SECURITY_HEADERS.items():
            resp.headers[name] = value
        return resp

    @app.errorhandler(InternalServerError)
    def internal_error(e):
        log.error("Unhandled error: %s", e.original_exception or e,
                  exc_info=e.original_exception or e)
        return render_error_page()

    # -----------------------------------------------------------------------
    # Error pages
    # -----------------------------------------------------------------------
    @app.route("/404")
    def not_found_page():
        return render_page(NOT_FOUND_TEMPLATE, 404)

    @app.route("/500")
    def server_error_page():
        return render_error_page()

    # -----------------------------------------------------------------------
    # Root redirect (also catches every unknown path)
    # -----------------------------------------------------------------------
    @app.route("/")
    @app.route("/<path:path>")
    def index(path=None):
        return redirect(url_for("friends.friends_page"), code=301)

    return app
