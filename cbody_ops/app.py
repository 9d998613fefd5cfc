"""
Application factory
"""

# Python Packages
import logging

from flask import Flask
from flask_cors import CORS
from flask_migrate import Migrate

# Local Imports
from .base import constants
from .config.swagger import api
from .config.urls import URLs
from .config.database import init_db, db





def create_app(config_overrides: dict = None):
    """
    Application Factory

    Args:
        config_overrides (dict): Flask config applied before extensions start
    """

    # Logging
    logging.basicConfig(
        level = constants.LOG_LEVEL,
        format = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )

    # App Object
    app = Flask(__name__)
    app.config["DEBUG"] = constants.APP_ENV != "production"
    app.config["SECRET_KEY"] = constants.APP_SECRET_KEY
    app.config["RESTX_MASK_SWAGGER"] = False

    if config_overrides:
        app.config.update(config_overrides)

    # Initialize Database
    init_db(app)

    # Register models
    from . import models

    # Initialize Migration
    Migrate(app, db)

    # Enable CORS
    CORS(app, origins = constants.CORS_ORIGINS)

    # Initialize Swagger
    api.init_app(app)

    # Register Namespaces
    URLs.add_namespaces()

    logging.getLogger(__name__).info("🚀 CBODY Ops API ready (env=%s)", constants.APP_ENV)

    return app



if __name__ == "__main__":
    create_app().run(host = "0.0.0.0", port = 5000)
