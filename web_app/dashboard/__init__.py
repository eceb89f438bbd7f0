# web_app/dashboard/__init__.py
from flask import Flask
from config import Config
from dashboard.logger import logger  # unified logger


def create_app(config_class=Config):
    app = Flask(__name__, static_folder='static', template_folder='templates')
    app.config.from_object(config_class)
    app.secret_key = app.config["SECRET_KEY"]  # for Flask sessions

    # rows are column-ordered dicts, keep key order in JSON (API + cookie session)
    app.json.sort_keys = False

    # Blueprints registration
    from dashboard.routes import api_bp, reports_bp
    app.register_blueprint(api_bp)
    app.register_blueprint(reports_bp)

    logger.info(f"App created: environment={app.config.get('ENVIRONMENT')} mocking={app.config.get('ENABLE_MOCKING')}")
    return app
