import os


# profiles per deployment; REPORTDASH_ENVIRONMENT picks one of them
ENVIRONMENTS = {
    "development": {
        "api_base_url": "http://localhost:5000/api",
        "enable_mocking": True,
        "enable_logging": True,
    },
    "staging": {
        "api_base_url": "https://staging-api.example.com/v1",
        "enable_mocking": False,
        "enable_logging": True,
    },
    "production": {
        "api_base_url": "https://api.example.com/v1",
        "enable_mocking": False,
        "enable_logging": False,
    },
}


def _env_flag(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config:
    # which profile from ENVIRONMENTS (unknown -> development)
    ENVIRONMENT = os.environ.get("REPORTDASH_ENVIRONMENT", "development")
    if ENVIRONMENT not in ENVIRONMENTS:
        ENVIRONMENT = "development"
    _PROFILE = ENVIRONMENTS[ENVIRONMENT]

    # Reports API
    API_BASE_URL = os.environ.get("REPORTDASH_API_BASE_URL") or _PROFILE["api_base_url"]
    API_TOKEN = os.environ.get("REPORTDASH_API_TOKEN", "")  # bearer token for a real backend
    ENABLE_MOCKING = _env_flag("REPORTDASH_ENABLE_MOCKING", _PROFILE["enable_mocking"])
    ENABLE_API_LOGGING = _env_flag("REPORTDASH_ENABLE_API_LOGGING", _PROFILE["enable_logging"])
    REQUEST_TIMEOUT = 10  # seconds

    # simulated latency of the mock endpoint, 0 disables it
    REPORT_DELAY_SECONDS = 0.1

    # Secret key for Flask sessions
    SECRET_KEY = os.environ.get("REPORTDASH_SECRET_KEY", "dev-only-change-me")

    # log path
    LOG_LEVEL = os.environ.get("REPORTDASH_LOG_LEVEL", "INFO")
    LOG_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "../log")
    APP_LOG = os.environ.get("REPORTDASH_LOG") or os.path.join(LOG_DIR, "app_reportdash.log")
