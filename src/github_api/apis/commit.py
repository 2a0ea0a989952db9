from typing import Any

from github_api.apis.base import AbstractApi


class CommitApi(AbstractApi):
    def get_branch_commits(self, username: str, repo: str, branch: str) -> Any:
        return self.client.get(f"commits/list/{username}/{repo}/{branch}")

    def get_file_commits(self, username: str, repo: str, branch: str, path: str) -> Any:
        return self.client.get(f"commits/list/{username}/{repo}/{branch}/{path}")

    def get_commit(self, username: str, repo: str, sha: str) -> Any:
        return self.client.get(f"commits/show/{username}/{repo}/{sha}")
