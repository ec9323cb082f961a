from flask import Flask
from .extensions import db, migrate, login_manager
from .config import Config
from .log import configure_logging, get_logger
from .seed import register_commands

log = get_logger(__name__)


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)
    configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)

    # Ensure tables exist for a smooth first run
    with app.app_context():
        db.create_all()

    register_commands(app)
    log.info("app_created", database=app.config["SQLALCHEMY_DATABASE_URI"].split("://")[0])
    return app
