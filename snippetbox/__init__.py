from flask import Flask, jsonify, request
from sqlalchemy.exc import SQLAlchemyError

from config import Config
from snippetbox.extensions import db, migrate, login_manager


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)
    flask_app.logger.setLevel(flask_app.config.get("LOG_LEVEL", "INFO"))

    is_dev = flask_app.config.get("IS_DEV", False)

    if not is_dev:
        if not flask_app.config.get("SECRET_KEY"):
            raise RuntimeError("SECRET_KEY is not set")
        if not flask_app.config.get("SQLALCHEMY_DATABASE_URI"):
            raise RuntimeError("DATABASE_URL is not set")
        flask_app.config["AUTO_CREATE_DB"] = False

    db.init_app(flask_app)
    migrate.init_app(flask_app, db)

    # dev only: auto create tables when migrations are not in use
    if flask_app.config.get("AUTO_CREATE_DB", False):
        try:
            with flask_app.app_context():
                from . import models  # noqa: F401  (registers the models in metadata)

                from sqlalchemy import inspect
                inspector = inspect(db.engine)

                if not inspector.get_table_names():
                    flask_app.logger.warning("AUTO_CREATE_DB=1: creating tables (empty db).")
                    db.create_all()
                    flask_app.logger.warning(
                        f"AUTO_CREATE_DB: tables now: {inspect(db.engine).get_table_names()}"
                    )
        except SQLAlchemyError:
            flask_app.logger.exception("AUTO_CREATE_DB: error creating tables.")

    login_manager.init_app(flask_app)
    login_manager.login_view = 'routes.login'

    from snippetbox.routes import bp as main_bp
    flask_app.register_blueprint(main_bp)

    @flask_app.errorhandler(SQLAlchemyError)
    def handle_storage_error(error):
        db.session.rollback()
        flask_app.logger.exception("Storage error on %s %s", request.method, request.path)
        if request.is_json or request.accept_mimetypes.best == "application/json":
            return jsonify({"success": False, "reason": "storage_error"}), 500
        return "Internal Server Error", 500

    return flask_app
