from collections.abc import Mapping
from typing import Any, Self

from github_api.apis.base import AbstractApi
from github_api.apis.commit import CommitApi
from github_api.apis.issue import IssueApi
from github_api.apis.object import ObjectApi
from github_api.apis.user import UserApi
from github_api.compat import DeprecatedApiMixin
from github_api.config import RequestOptions
from github_api.exceptions import ApiNotFoundError
from github_api.services.request import GitHubApiRequest


class GitHubApi(DeprecatedApiMixin):
    """Entry point: owns one request and one instance per resource API.

    Both are created on first use and reused afterwards; `set_request` and
    `set_api` replace them, e.g. with test doubles.

        api = GitHubApi()
        api.authenticate("alice", "secret")
        api.get_issue_api().get_list("alice", "project", "closed")
        api.get("repos/show/alice/project")
    """

    def __init__(self, debug: bool = False) -> None:
        self.debug = debug
        self._request: GitHubApiRequest | None = None
        self._apis: dict[str, Any] = {}

    def authenticate(self, login: str | None, token: str | None) -> Self:
        self.get_request().set_options({"login": login, "token": token})
        return self

    def deauthenticate(self) -> Self:
        return self.authenticate(None, None)

    def get(
        self,
        route: str,
        parameters: Mapping[str, Any] | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> Any:
        return self.get_request().get(route, parameters, options)

    def post(
        self,
        route: str,
        parameters: Mapping[str, Any] | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> Any:
        return self.get_request().post(route, parameters, options)

    def get_request(self) -> GitHubApiRequest:
        if self._request is None:
            self._request = GitHubApiRequest(options=RequestOptions(debug=self.debug))
        return self._request

    def set_request(self, request: GitHubApiRequest) -> Self:
        self._request = request
        return self

    def get_user_api(self) -> UserApi:
        return self._lazy_api("user", UserApi)

    def get_issue_api(self) -> IssueApi:
        return self._lazy_api("issue", IssueApi)

    def get_commit_api(self) -> CommitApi:
        return self._lazy_api("commit", CommitApi)

    def get_object_api(self) -> ObjectApi:
        return self._lazy_api("object", ObjectApi)

    def set_api(self, name: str, instance: Any) -> Self:
        self._apis[name] = instance
        return self

    def get_api(self, name: str) -> Any:
        try:
            return self._apis[name]
        except KeyError:
            raise ApiNotFoundError(name) from None

    def _lazy_api(self, name: str, api_class: type[AbstractApi]) -> Any:
        if name not in self._apis:
            self._apis[name] = api_class(self)
        return self._apis[name]
