# web_app/dashboard/routes/__init__.py
from .api import api_bp
from .reports import reports_bp
