from urllib.parse import parse_qsl

import httpx
import pytest

from github_api.client import GitHubApi
from github_api.services.request import GitHubApiRequest
from github_api.services.transport import HttpTransport


class RecordingHandler:
    """Answers every request with a canned response and remembers the request."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.body = '{"ok": true}'
        self.error: Exception | None = None

    def respond(self, status_code: int = 200, body: str = '{"ok": true}') -> None:
        self.status_code = status_code
        self.body = body

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, text=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_form(self) -> dict[str, str]:
        return dict(parse_qsl(self.last.content.decode()))


@pytest.fixture
def handler() -> RecordingHandler:
    return RecordingHandler()


@pytest.fixture
def request_(handler: RecordingHandler) -> GitHubApiRequest:
    return GitHubApiRequest(transport=HttpTransport(httpx.MockTransport(handler)))


@pytest.fixture
def api(request_: GitHubApiRequest) -> GitHubApi:
    return GitHubApi().set_request(request_)
