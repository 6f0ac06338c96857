"""Application factory and app-wide configuration."""

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from blendcalc.app.api.routes import EXTENSION_KEY, api_bp
from blendcalc.config import Settings, get_settings
from blendcalc.domain.history import REFERENCE_TABLE, ReturnTable, load_table

logger = logging.getLogger(__name__)


def _load_returns(settings: Settings) -> ReturnTable:
    if settings.returns_file is None:
        logger.info(
            f"Using reference return table {REFERENCE_TABLE.first_year}-{REFERENCE_TABLE.last_year}"
        )
        return REFERENCE_TABLE

    table = load_table(settings.returns_file)
    logger.info(
        f"Loaded {len(table.rows)} yearly returns from {settings.returns_file} "
        f"({table.first_year}-{table.last_year})"
    )
    return table


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance. The return table is loaded once here."""
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = Flask(__name__)

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.cors_origins}},
        supports_credentials=True,
    )

    app.extensions[EXTENSION_KEY] = {
        "settings": settings,
        "table": _load_returns(settings),
        "assumptions": settings.income_assumptions(),
    }

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
