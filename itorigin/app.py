"""
Application factory
"""

# Python Packages
from flask import Flask
from flask_cors import CORS
from flask_migrate import Migrate

# Local Imports
from .base import constants
from .config.swagger import create_api
from .config.urls import URLs
from .config.database import init_db, db
from .config.logger import init_logging
from .chat.config import chat_config
from .commands import chat_cli





def create_app(config_overrides: dict = None):
    """
    Application Factory

    Args:
        config_overrides: Flask config values applied before extensions
            initialise (tests pass SQLALCHEMY_DATABASE_URI here).
    """

    init_logging()

    # App Object
    app = Flask(__name__)
    app.config["DEBUG"] = constants.APP_ENV != "production"
    app.config["SECRET_KEY"] = constants.APP_SECRET_KEY

    if config_overrides:
        app.config.update(config_overrides)

    # Initialize Database
    init_db(app)

    # Register models
    from . import models  # noqa: F401

    # Initialize Migration
    Migrate(app, db)

    # Enable CORS; the widget must be able to read the conversation header
    CORS(
        app,
        origins = constants.CORS_ORIGINS,
        expose_headers = [chat_config.CONVERSATION_ID_HEADER]
    )

    # Initialize Swagger
    api = create_api()
    api.init_app(app)

    # Register Namespaces
    URLs.add_namespaces(api)

    # CLI
    app.cli.add_command(chat_cli)

    return app



if __name__ == "__main__":
    create_app().run(host = "0.0.0.0", port = 5000, threaded = True)
