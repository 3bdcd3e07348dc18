import logging

from flask import Flask, jsonify
from pymysql import connect
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError

from config import Config
from .extensions import bcrypt, cors, db, migrate
from . import models  # noqa: F401  (registers the tables)
from .routes.auth_routes import auth_bp
from .routes.checklist_routes import checklist_bp
from .routes.portfolio_routes import portfolio_bp
from .routes.ai_routes import ai_bp
from .database.seed.seed_all import seed_all

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    configure_logging(app)

    # Allow the front end to call the JSON API with the session cookie
    cors.init_app(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    if app.config["SQLALCHEMY_DATABASE_URI"].startswith("mysql"):
        create_database_if_not_exists(app.config["SQLALCHEMY_DATABASE_URI"])

    # extensions initialization
    db.init_app(app)
    migrate.init_app(app, db)
    bcrypt.init_app(app)

    app.register_blueprint(auth_bp)
    app.register_blueprint(checklist_bp)
    app.register_blueprint(portfolio_bp)
    app.register_blueprint(ai_bp)

    register_error_handlers(app)

    app.cli.add_command(seed_all)

    if app.config.get("AUTO_CREATE_TABLES"):
        with app.app_context():
            db.create_all()

    return app


def configure_logging(app):
    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )
    logging.getLogger().setLevel(level)


def register_error_handlers(app):
    @app.errorhandler(SQLAlchemyError)
    def handle_database_error(e):
        db.session.rollback()
        logger.error(f"❌ Database error: {e}")
        return jsonify({"error": "Internal server error"}), 500


def create_database_if_not_exists(uri):
    url = make_url(uri)

    logger.info(f"🔧 Ensuring database '{url.database}' exists...")
    logger.info(f"Connecting to DB server at {url.host}:{url.port or 3306} with user '{url.username}'")

    conn = connect(
        host=url.host,
        port=url.port or 3306,
        user=url.username,
        password=url.password or "",
    )
    try:
        with conn.cursor() as cursor:
            cursor.execute(f"CREATE DATABASE IF NOT EXISTS `{url.database}`")
        conn.commit()
    finally:
        conn.close()
