"""Template rendering with a fallback to the 500 page."""

import logging

from flask import make_response, render_template

log = logging.getLogger(__name__)

NOT_FOUND_TEMPLATE = "404.html"
SERVER_ERROR_TEMPLATE = "500.html"


def render_page(template_name: str, status: int = 200, **context):
    """Render ``template_name`` with ``context`` and the given status.

    Any failure while loading, parsing or executing the template is logged and
    the 500 page is returned instead.
    """
    try:
        body = render_template(template_name, **context)
    except Exception:
        log.exception("Error rendering template %s", template_name)
        return render_error_page()
    return make_response(body, status)


def render_error_page():
    """Render the 500 page; plain text if that template is broken too."""
    try:
        body = render_template(SERVER_ERROR_TEMPLATE)
    except Exception:
        log.exception("Error rendering template %s", SERVER_ERROR_TEMPLATE)
        return make_response(
            "500 Internal Server Error",
            500,
            {"Content-Type": "text/plain; charset=utf-8"},
        )
    return make_response(body, 500)
