"""Flask application factory."""

import logging
from typing import Callable, Optional

from flask import Flask

from careerpages.config import SiteConfig, configure_logging
from careerpages.services.notion import NotionService
from careerpages.services.sheets import SheetsService

LOGGER = logging.getLogger(__name__)


def create_app(
    config: Optional[SiteConfig] = None,
    *,
    sheets_service_factory: Optional[Callable[[SiteConfig], SheetsService]] = None,
    notion_service_factory: Optional[Callable[[SiteConfig], NotionService]] = None,
) -> Flask:
    """Create the app.

    :param config: process configuration; read from the environment (and
        ``.env``) when omitted.
    :param sheets_service_factory: builds the Sheet Reader per request.
    :param notion_service_factory: builds the Document Renderer per request.
    """
    from careerpages.web.api import bp as api

    if config is None:
        config = SiteConfig.from_env()
        configure_logging(config)

    app = Flask(__name__)
    app.config["SITE_CONFIG"] = config
    app.config["SHEETS_SERVICE_FACTORY"] = (
        sheets_service_factory or SheetsService.from_config
    )
    app.config["NOTION_SERVICE_FACTORY"] = (
        notion_service_factory or NotionService.from_config
    )
    app.register_blueprint(api)
    LOGGER.debug("careerpages app created")
    return app
