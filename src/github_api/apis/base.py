from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from github_api.client import GitHubApi


class AbstractApi:
    """Base for resource APIs: each keeps a reference to the owning client."""

    def __init__(self, client: "GitHubApi") -> None:
        self.client = client
