import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

import requests
from flask import current_app
from requests import Session
from requests.adapters import HTTPAdapter

logger = logging.getLogger(__name__)


@dataclass
class ApiSuccess:
    payload: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ApiRejected:
    payload: Dict[str, Any] = field(default_factory=dict)
    message: str = ""
    errors: List[str] = field(default_factory=list)


@dataclass
class ApiTransportError:
    error: Exception


ApiResult = Union[ApiSuccess, ApiRejected, ApiTransportError]


class BackendClient:
    """Client for the data backend's JSON API.

    Every call returns exactly one ``ApiResult``; transport problems never
    escape as exceptions. Nothing is retried.
    """

    def __init__(self, base_url: str, *, timeout: float = 10.0, session: Optional[Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session: Session = session or requests.Session()
        if session is None:
            adapter = HTTPAdapter(max_retries=0)
            self.session.mount("http://", adapter)
            self.session.mount("https://", adapter)

    def close(self):
        try:
            self.session.close()
        except Exception:
            pass

    def request(self, method: str, path: str, *, require_ok: bool = False, **kwargs) -> ApiResult:
        url = f"{self.base_url}{path}"
        try:
            resp = self.session.request(method=method, url=url, timeout=self.timeout, **kwargs)
            body = resp.json()
        except (requests.RequestException, ValueError) as e:
            return ApiTransportError(e)

        if not isinstance(body, dict):
            return ApiTransportError(ValueError(f"Unexpected response body from {method} {path}"))

        logger.debug("%s %s -> %s (%s)", method, path, resp.status_code, body.get("status"))

        status = body.get("status")
        rejected = status != "ok" if require_ok else status == "error"
        if rejected:
            errors = [
                str(item.get("msg", "")) for item in (body.get("errors") or []) if isinstance(item, dict)
            ]
            return ApiRejected(payload=body, message=body.get("msg") or "", errors=errors)
        return ApiSuccess(payload=body)

    def post_contact(self, payload: Dict[str, str]) -> ApiResult:
        return self.request("POST", "/api/contact", json=payload)

    def post_project(self, payload: Dict[str, str]) -> ApiResult:
        return self.request("POST", "/api/project", json=payload)

    def get_projects(self) -> ApiResult:
        return self.request("GET", "/api/projects", require_ok=True)


def init_backend_client(app):
    client = BackendClient(
        app.config.get("BACKEND_API_URL", "http://localhost:3000"),
        timeout=app.config.get("HTTP_DEFAULT_TIMEOUT", 10.0),
    )
    app.extensions["backend_client"] = client


def shutdown_backend_client(app):
    client: BackendClient = app.extensions.get("backend_client")
    if client:
        client.close()


def get_backend_client() -> BackendClient:
    client: BackendClient = current_app.extensions.get("backend_client")
    if client is None:
        raise RuntimeError("Backend client not initialized")
    return client
