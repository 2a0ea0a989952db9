import warnings
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from github_api.apis.commit import CommitApi
    from github_api.apis.issue import IssueApi
    from github_api.apis.object import ObjectApi
    from github_api.apis.user import UserApi


def _deprecated(replacement: str) -> None:
    warnings.warn(f"use {replacement} instead", DeprecationWarning, stacklevel=3)


class DeprecatedApiMixin(ABC):
    """Old flat methods kept for backward compatibility.

    Each one only forwards to the resource API named in its warning.
    """

    @abstractmethod
    def get_user_api(self) -> "UserApi": ...

    @abstractmethod
    def get_issue_api(self) -> "IssueApi": ...

    @abstractmethod
    def get_commit_api(self) -> "CommitApi": ...

    @abstractmethod
    def get_object_api(self) -> "ObjectApi": ...

    def search_users(self, username: str) -> Any:
        _deprecated("get_user_api().search()")
        return self.get_user_api().search(username)

    def show_user(self, username: str) -> Any:
        _deprecated("get_user_api().show()")
        return self.get_user_api().show(username)

    def list_issues(self, username: str, repo: str, state: str = "open") -> Any:
        _deprecated("get_issue_api().get_list()")
        return self.get_issue_api().get_list(username, repo, state)

    def search_issues(
        self, username: str, repo: str, state: str, search_term: str
    ) -> Any:
        _deprecated("get_issue_api().search()")
        return self.get_issue_api().search(username, repo, state, search_term)

    def show_issue(self, username: str, repo: str, number: int) -> Any:
        _deprecated("get_issue_api().show()")
        return self.get_issue_api().show(username, repo, number)

    def list_branch_commits(self, username: str, repo: str, branch: str) -> Any:
        _deprecated("get_commit_api().get_branch_commits()")
        return self.get_commit_api().get_branch_commits(username, repo, branch)

    def list_file_commits(
        self, username: str, repo: str, branch: str, path: str
    ) -> Any:
        _deprecated("get_commit_api().get_file_commits()")
        return self.get_commit_api().get_file_commits(username, repo, branch, path)

    def list_object_tree(self, username: str, repo: str, tree_sha: str) -> Any:
        _deprecated("get_object_api().show_tree()")
        return self.get_object_api().show_tree(username, repo, tree_sha)

    def show_object_blob(
        self, username: str, repo: str, tree_sha: str, path: str
    ) -> Any:
        _deprecated("get_object_api().show_blob()")
        return self.get_object_api().show_blob(username, repo, tree_sha, path)

    def list_object_blobs(self, username: str, repo: str, tree_sha: str) -> Any:
        _deprecated("get_object_api().list_blobs()")
        return self.get_object_api().list_blobs(username, repo, tree_sha)
