import click
from flask import Flask, jsonify
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from livevote.config import Config
from livevote.errors import LiveVoteError, Unauthorized
from livevote.extensions import cors, db, login_manager, migrate, socketio
from livevote.routes import register_routes
from livevote.services.admins import ensure_bootstrap_admin
from livevote.services.security import load_admin_from_request


def create_app(overrides=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)

    if not app.config.get("SQLALCHEMY_DATABASE_URI"):
        raise RuntimeError("DATABASE_URL is not set; refusing to start.")
    if not app.config.get("SECRET_KEY"):
        raise RuntimeError("SECRET_KEY is not set; refusing to start.")

    db.init_app(app)
    migrate.init_app(app, db)
    login_manager.init_app(app)
    cors.init_app(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}})
    socketio.init_app(app, cors_allowed_origins=app.config["CORS_ORIGINS"])

    login_manager.request_loader(load_admin_from_request)

    @login_manager.unauthorized_handler
    def unauthorized():
        error = Unauthorized("Access denied. Valid admin token required.")
        return jsonify(error.to_dict()), error.status_code

    register_error_handlers(app)
    register_routes(app)
    register_commands(app)
    return app


def register_error_handlers(app):
    @app.errorhandler(LiveVoteError)
    def handle_livevote_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({"error": error.description}), error.code

    @app.errorhandler(SQLAlchemyError)
    def handle_store_error(error):
        db.session.rollback()
        app.logger.exception("Unexpected database error")
        return jsonify({"error": "Internal server error"}), 500


def register_commands(app):
    @app.cli.command("create-admin")
    @click.option("--username", default=None, help="Defaults to ADMIN_USERNAME.")
    @click.option("--password", default=None, help="Defaults to ADMIN_PASSWORD.")
    def create_admin_command(username, password):
        """Create the bootstrap admin if no admin exists."""
        admin = ensure_bootstrap_admin(username, password)
        if admin is None:
            click.echo("An admin account already exists.")
        else:
            click.echo(f"Created admin '{admin.username}'.")


__all__ = ["create_app", "db", "migrate", "socketio"]
