# dashboard/client/api_client.py
from __future__ import annotations

import json
from typing import Any, Dict, Optional

import requests

from dashboard.logger import logger


class ApiError(Exception):
    """Transport failure or non-2xx answer from the reports API."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


def _decode(url: str, status: int, content_type: str, text: str) -> Any:
    if not 200 <= status < 300:
        logger.error(f"API request failed: {url} status={status}")
        raise ApiError(f"HTTP error! status: {status}", status=status)

    if "application/json" in (content_type or ""):
        try:
            return json.loads(text)
        except ValueError as e:
            logger.error(f"API returned invalid JSON: {url}: {e}")
            raise ApiError("Invalid JSON in response", status=status) from e
    return text


class _BaseClient:
    def __init__(self, log_calls: bool = False):
        self.default_headers: Dict[str, str] = {"Content-Type": "application/json"}
        self.log_calls = log_calls

    def set_auth_token(self, token: Optional[str]) -> None:
        if token:
            self.default_headers["Authorization"] = f"Bearer {token}"
        else:
            self.default_headers.pop("Authorization", None)

    def _headers(self, extra: Optional[Dict[str, str]]) -> Dict[str, str]:
        return {**self.default_headers, **(extra or {})}

    def request(self, method: str, endpoint: str, data: Any = None, headers: Optional[Dict[str, str]] = None) -> Any:
        raise NotImplementedError

    def get(self, endpoint: str, headers: Optional[Dict[str, str]] = None) -> Any:
        return self.request("GET", endpoint, headers=headers)

    def post(self, endpoint: str, data: Any, headers: Optional[Dict[str, str]] = None) -> Any:
        return self.request("POST", endpoint, data=data, headers=headers)

    def put(self, endpoint: str, data: Any, headers: Optional[Dict[str, str]] = None) -> Any:
        return self.request("PUT", endpoint, data=data, headers=headers)

    def delete(self, endpoint: str, headers: Optional[Dict[str, str]] = None) -> Any:
        return self.request("DELETE", endpoint, headers=headers)


class ApiClient(_BaseClient):
    """
    JSON client for the reports API over HTTP.

    - base_url e.g. "http://localhost:5000/api"; endpoints are appended ("/reports")
    - no retries, one request = one attempt
    - any failure (network, non-2xx, bad JSON) is raised as ApiError
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10,
        session: Optional[requests.Session] = None,
        log_calls: bool = False,
    ):
        super().__init__(log_calls=log_calls)
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()

    def request(self, method: str, endpoint: str, data: Any = None, headers: Optional[Dict[str, str]] = None) -> Any:
        url = f"{self.base_url}{endpoint}"
        if self.log_calls:
            logger.info(f"API call: {method} {url}")

        body = json.dumps(data) if data is not None else None
        try:
            resp = self._session.request(
                method,
                url,
                data=body,
                headers=self._headers(headers),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"API request failed: {method} {url}: {e}")
            raise ApiError(f"Request failed: {e}") from e

        return _decode(url, resp.status_code, resp.headers.get("Content-Type", ""), resp.text)


class InProcessClient(_BaseClient):
    """
    Same contract as ApiClient, dispatched through the Flask test client of `app`.
    Used by the dashboard when mocking is enabled so it never calls itself over the network.
    """

    def __init__(self, app, prefix: str = "/api", log_calls: bool = False):
        super().__init__(log_calls=log_calls)
        self.app = app
        self.prefix = prefix.rstrip("/")

    def request(self, method: str, endpoint: str, data: Any = None, headers: Optional[Dict[str, str]] = None) -> Any:
        path = f"{self.prefix}{endpoint}"
        if self.log_calls:
            logger.info(f"API call (in-process): {method} {path}")

        body = json.dumps(data) if data is not None else None
        resp = self.app.test_client().open(path, method=method, data=body, headers=self._headers(headers))
        return _decode(path, resp.status_code, resp.headers.get("Content-Type", ""), resp.get_data(as_text=True))
