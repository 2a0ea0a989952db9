from typing import Any

from github_api.apis.base import AbstractApi


class ObjectApi(AbstractApi):
    """Git trees and blobs."""

    def show_tree(self, username: str, repo: str, tree_sha: str) -> Any:
        return self.client.get(f"tree/show/{username}/{repo}/{tree_sha}")

    def show_blob(self, username: str, repo: str, tree_sha: str, path: str) -> Any:
        return self.client.get(f"blob/show/{username}/{repo}/{tree_sha}/{path}")

    def list_blobs(self, username: str, repo: str, tree_sha: str) -> Any:
        return self.client.get(f"blob/all/{username}/{repo}/{tree_sha}")

    def get_raw_data(self, username: str, repo: str, object_sha: str) -> str:
        # raw blob content is not JSON
        return self.client.get(
            f"blob/show/{username}/{repo}/{object_sha}", options={"format": "text"}
        )
