# tests/conftest.py
# shared fixtures: app built with a test config (no delay, in-process client, log into tmp)
# Run: pytest -q from the repository root

import os
import tempfile

# must be set before config/logger are imported
os.environ.setdefault("REPORTDASH_LOG", os.path.join(tempfile.gettempdir(), "reportdash_tests", "app_reportdash.log"))

import pytest

from config import Config
from dashboard import create_app


class TestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    REPORT_DELAY_SECONDS = 0
    ENABLE_MOCKING = True
    ENABLE_API_LOGGING = False


@pytest.fixture
def app():
    return create_app(TestConfig)


@pytest.fixture
def client(app):
    return app.test_client()
