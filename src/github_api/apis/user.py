from typing import Any

from github_api.apis.base import AbstractApi


class UserApi(AbstractApi):
    """Searching, showing and following users.

    http://develop.github.com/p/users.html
    """

    def search(self, username: str) -> Any:
        return self.client.get(f"user/search/{username}")

    def show(self, username: str) -> Any:
        return self.client.get(f"user/show/{username}")

    def update(self, username: str, data: dict[str, Any]) -> Any:
        """Update profile fields (name, email, blog, company, location).

        Requires authentication as `username`.
        """
        values = {f"values[{key}]": value for key, value in data.items()}
        return self.client.post(f"user/show/{username}", values)

    def get_following(self, username: str) -> Any:
        return self.client.get(f"user/show/{username}/following")

    def get_followers(self, username: str) -> Any:
        return self.client.get(f"user/show/{username}/followers")

    def follow(self, username: str) -> Any:
        return self.client.post(f"user/follow/{username}")

    def unfollow(self, username: str) -> Any:
        return self.client.post(f"user/unfollow/{username}")

    def get_watched_repos(self, username: str) -> Any:
        return self.client.get(f"repos/watched/{username}")
