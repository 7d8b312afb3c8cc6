import json

import httpx
import pytest

from theme_purge_tools.utils.http_client import JsonClient


class FakePurgeApi:
    """Scripted stand-in for purge.jsdelivr.net."""

    def __init__(self, submit=None, statuses=()):
        self.submit = submit if submit is not None else {"id": "job-1", "status": "pending"}
        self.statuses = list(statuses)
        self.requests: list[httpx.Request] = []

    @property
    def status_calls(self) -> int:
        return sum(1 for r in self.requests if r.url.path.startswith("/status/"))

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.method == "POST":
            return httpx.Response(200, json=self.submit)
        body = self.statuses.pop(0) if len(self.statuses) > 1 else self.statuses[0]
        return httpx.Response(200, json=body)

    def client(self) -> JsonClient:
        return JsonClient(transport=httpx.MockTransport(self.handler))

    def posted_json(self):
        return json.loads(self.requests[0].content)


@pytest.fixture
def theme_root(tmp_path):
    for name in ("b", "a"):
        (tmp_path / name).mkdir()
        (tmp_path / name / "theme.css").write_text("body {}")
    (tmp_path / "no-marker").mkdir()
    (tmp_path / ".hidden").mkdir()
    (tmp_path / ".hidden" / "theme.css").write_text("")
    (tmp_path / "README.md").write_text("")
    return tmp_path
