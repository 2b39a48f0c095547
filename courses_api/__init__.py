"""
Main application initialization module.
Sets up the Flask app with configuration, database, routes and error handlers.
"""
from flask import Flask
from flask_cors import CORS
from sqlalchemy.engine import make_url
import logging

from .config import get_config, normalize_database_url
from .database import db
from .utils.converters import IdConverter
from .utils.errors import register_error_handlers

logger = logging.getLogger(__name__)


def create_app(config_name=None, database_url=None):
    """
    Create and configure the Flask application
    @param config_name: str - Name of the configuration to use
    @param database_url: str - Optional database URL overriding the configuration
    @returns: Flask - Configured Flask application instance
    """
    config_class = get_config(config_name)

    app = Flask(__name__)
    app.config.from_object(config_class)
    if database_url:
        app.config['SQLALCHEMY_DATABASE_URI'] = normalize_database_url(database_url)
    else:
        config_class.validate()

    CORS(app, resources={
        r"/*": {"origins": app.config['CORS_ORIGINS']}
    })

    # Routes are compiled against the converter map, so register before blueprints
    app.url_map.converters['id'] = IdConverter

    db.init_app(app)

    # Models must be imported before create_all so their tables are known
    from . import models  # noqa: F401

    with app.app_context():
        db.create_all()
    safe_url = make_url(app.config['SQLALCHEMY_DATABASE_URI']).render_as_string(hide_password=True)
    logger.info(f"Database ready at {safe_url}")

    from .controllers.course_controller import course_bp
    app.register_blueprint(course_bp)
    logger.info("Successfully registered course blueprint")

    from .controllers.review_controller import review_bp
    app.register_blueprint(review_bp)
    logger.info("Successfully registered review blueprint")

    register_error_handlers(app)

    @app.route('/health', methods=['GET'])
    def health_check():
        return {'status': 'healthy'}, 200

    return app
