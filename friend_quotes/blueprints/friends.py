"""Friends blueprint – paginated quotes listing."""

import logging

from flask import Blueprint, current_app, request

from .. import config
from ..content import ContentError
from ..friends import load_friends
from ..pagination import PageNotFound, paginate, parse_page_number
from ..rendering import NOT_FOUND_TEMPLATE, render_error_page, render_page

log = logging.getLogger(__name__)

friends_bp = Blueprint("friends", __name__)


def canonical_url() -> str:
    """Scheme, host and request URI of the current request."""
    uri = request.full_path if request.query_string else request.path
    return f"{request.scheme}://{request.host}{uri}"


@friends_bp.route("/friends")
def friends_page():
    page = parse_page_number(request.args.get("page"))

    try:
        friends = load_friends(
            current_app.config["CONTENT_STORE"],
            current_app.config["FRIENDS_FILE"],
        )
    except ContentError:
        log.error("Error reading friends", exc_info=True)
        return render_error_page()

    try:
        bounds = paginate(len(friends), page, current_app.config["FRIENDS_PER_PAGE"])
    except PageNotFound as e:
        log.info("%s", e)
        return render_page(NOT_FOUND_TEMPLATE, 404)

    return render_page(
        "index.html",
        title=config.TITLE_FORMAT.format(page=page),
        description=config.DESCRIPTION_FORMAT.format(page=page),
        canonical_url=canonical_url(),
        friends=friends[bounds["start"]:bounds["end"]],
        prev_page=bounds["prev_page"],
        next_page=bounds["next_page"],
        current_page=bounds["current_page"],
        total_pages=bounds["total_pages"],
        page_ranges=bounds["page_ranges"],
    )
