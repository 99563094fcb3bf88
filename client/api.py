import logging
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """A failed API call: HTTP status, reason phrase and decoded body."""

    def __init__(self, status: Optional[int], status_text: str, data: Any = None):
        self.status = status
        self.status_text = status_text
        self.data = data
        super().__init__(f"{status} {status_text}")

    @property
    def errors(self):
        """Structured validation errors carried by the body, if any."""
        if isinstance(self.data, dict):
            return self.data.get("errors")
        return None


class ApiClient:
    """Thin JSON wrapper around an httpx.Client."""

    def __init__(self, base_url: str = "", http: Optional[httpx.Client] = None, timeout: float = 10.0):
        self.http = http if http is not None else httpx.Client(base_url=base_url, timeout=timeout)

    def set_auth_token(self, token: Optional[str]) -> None:
        if token:
            self.http.headers["Authorization"] = f"Bearer {token}"
        else:
            self.http.headers.pop("Authorization", None)

    def request(self, method: str, path: str, json: Any = None) -> Any:
        try:
            response = self.http.request(method, path, json=json)
        except httpx.RequestError as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise ApiError(None, str(e)) from e

        if response.is_error:
            try:
                data = response.json()
            except ValueError:
                data = response.text
            raise ApiError(response.status_code, response.reason_phrase, data)
        return response.json()

    def get(self, path: str) -> Any:
        return self.request("GET", path)

    def post(self, path: str, json: Any = None) -> Any:
        return self.request("POST", path, json=json)

    def put(self, path: str, json: Any = None) -> Any:
        return self.request("PUT", path, json=json)

    def delete(self, path: str) -> Any:
        return self.request("DELETE", path)
