from typing import Any
from urllib.parse import quote

from github_api.apis.base import AbstractApi


class IssueApi(AbstractApi):
    """Listing, searching and editing repository issues.

    http://develop.github.com/p/issues.html
    """

    def get_list(self, username: str, repo: str, state: str = "open") -> Any:
        return self.client.get(f"issues/list/{username}/{repo}/{state}")

    def search(self, username: str, repo: str, state: str, search_term: str) -> Any:
        term = quote(search_term, safe="")
        return self.client.get(f"issues/search/{username}/{repo}/{state}/{term}")

    def show(self, username: str, repo: str, number: int) -> Any:
        return self.client.get(f"issues/show/{username}/{repo}/{number}")

    def open(self, username: str, repo: str, title: str, body: str) -> Any:
        return self.client.post(
            f"issues/open/{username}/{repo}", {"title": title, "body": body}
        )

    def close(self, username: str, repo: str, number: int) -> Any:
        return self.client.post(f"issues/close/{username}/{repo}/{number}")

    def reopen(self, username: str, repo: str, number: int) -> Any:
        return self.client.post(f"issues/reopen/{username}/{repo}/{number}")

    def get_comments(self, username: str, repo: str, number: int) -> Any:
        return self.client.get(f"issues/comments/{username}/{repo}/{number}")

    def add_comment(self, username: str, repo: str, number: int, comment: str) -> Any:
        return self.client.post(
            f"issues/comment/{username}/{repo}/{number}", {"comment": comment}
        )

    def get_labels(self, username: str, repo: str) -> Any:
        return self.client.get(f"issues/labels/{username}/{repo}")

    def add_label(self, username: str, repo: str, label: str, number: int) -> Any:
        return self.client.post(f"issues/label/add/{username}/{repo}/{label}/{number}")

    def remove_label(self, username: str, repo: str, label: str, number: int) -> Any:
        return self.client.post(
            f"issues/label/remove/{username}/{repo}/{label}/{number}"
        )
