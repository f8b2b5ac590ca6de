"""JSON endpoints consumed by the site's client-side router."""

import logging

from flask import Blueprint, Response, current_app, jsonify, request

from careerpages.exceptions import ConfigurationError, InvalidDocumentReference
from careerpages.services.notion import NotionError, require_page_id

LOGGER = logging.getLogger(__name__)

bp = Blueprint("api", __name__)

#: Hosted Notion file URLs embedded in the markup expire after about an hour,
#: so shared caches may only hold a rendered page briefly.
NOTION_CACHE_CONTROL = "s-maxage=60, stale-while-revalidate=300"

_READ_METHODS = ("GET",)
_ALL_METHODS = ["GET", "HEAD", "OPTIONS", "POST", "PUT", "PATCH", "DELETE"]


def _method_not_allowed() -> Response:
    return Response("Method Not Allowed", status=405, headers={"Allow": "GET"})


@bp.route("/api/sheets", methods=_ALL_METHODS, provide_automatic_options=False)
def sheets():
    """Home copy, job list and per-job sections from the spreadsheet."""
    if request.method not in _READ_METHODS:
        return _method_not_allowed()

    site_config = current_app.config["SITE_CONFIG"]
    try:
        service = current_app.config["SHEETS_SERVICE_FACTORY"](site_config)
        content = service.read_site_content()
    except ConfigurationError as e:
        LOGGER.error("[sheets] configuration error: %s", e)
        return Response(str(e), status=500, mimetype="text/plain")
    except Exception:
        LOGGER.exception("[sheets] error")
        return Response("Sheets read error", status=500, mimetype="text/plain")

    resp = jsonify(content.to_json_dict())
    if site_config.cors_origin:
        resp.headers["Access-Control-Allow-Origin"] = site_config.cors_origin
    return resp


@bp.route(
    "/api/notion-html", methods=_ALL_METHODS, provide_automatic_options=False
)
def notion_html():
    """Rendered HTML for the Notion page given in ``?url=``."""
    if request.method not in _READ_METHODS:
        return _method_not_allowed()

    url = request.args.get("url", "")
    try:
        require_page_id(url)
    except InvalidDocumentReference as e:
        return jsonify(error=str(e)), 400

    try:
        service = current_app.config["NOTION_SERVICE_FACTORY"](
            current_app.config["SITE_CONFIG"]
        )
        html = service.render_document(url)
    except ConfigurationError as e:
        LOGGER.error("[notion-html] configuration error: %s", e)
        return jsonify(error=str(e)), 500
    except NotionError as e:
        LOGGER.error("[notion-html] error: %s", e)
        return jsonify(error=str(e) or "Notion rendering failed"), 500
    except Exception:
        LOGGER.exception("[notion-html] error")
        return jsonify(error="Notion rendering failed"), 500

    resp = jsonify(ok=True, html=html)
    resp.headers["Cache-Control"] = NOTION_CACHE_CONTROL
    return resp
