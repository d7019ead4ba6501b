import atexit
import logging
import os

from flask import Flask

from .config import config
from .http_client import init_backend_client, shutdown_backend_client
from .routes import bp as pages_bp
from .validators import is_valid_date_ymd


def create_app(config_class: type = None) -> Flask:
    config_class = config_class or config.get(os.getenv("APP_ENV", "default"), config["default"])

    app = Flask(__name__)
    app.config.from_object(config_class)

    level_name = str(app.config.get("LOG_LEVEL", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s %(message)s")

    dob_max = app.config.get("CONTACT_DOB_MAX")
    if dob_max and not is_valid_date_ymd(dob_max):
        raise RuntimeError(f"Configuration error: CONTACT_DOB_MAX must be yyyy-mm-dd, got {dob_max!r}")

    init_backend_client(app)
    atexit.register(shutdown_backend_client, app)

    app.register_blueprint(pages_bp)
    return app
