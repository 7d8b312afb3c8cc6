"""JSON over HTTPS helpers."""
from __future__ import annotations

import json
from typing import Any

import httpx

from theme_purge_tools.errors import NetworkError, ResponseParseError


class JsonClient:
    def __init__(
        self,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize a new JsonClient."""
        self.timeout = timeout
        self.transport = transport

    def _request(self, method: str, url: str, body: Any = None) -> Any:
        # One client per request, nothing is pooled between calls
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                if body is None:
                    res = client.request(method, url)
                else:
                    res = client.request(method, url, json=body)
        except httpx.RequestError as e:
            raise NetworkError(f"{method} {url} failed: {e}") from e

        try:
            return res.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ResponseParseError(f"Failed to parse response: {res.text!r}") from e

    def post(self, url: str, json_body: Any) -> Any:
        """POST a JSON body and return the parsed JSON response."""
        return self._request("POST", url, json_body)

    def get(self, url: str) -> Any:
        """GET a url and return the parsed JSON response."""
        return self._request("GET", url)
