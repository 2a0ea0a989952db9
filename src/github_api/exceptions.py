class GitHubApiError(Exception):
    """Base class for every error raised by this library."""


class TransportError(GitHubApiError):
    """The HTTP round trip itself failed (DNS, refused connection, timeout)."""


# self.args must hold every constructor argument; unpickling calls cls(*args).
class DecodeError(GitHubApiError):
    def __init__(self, message: str, raw_body: str) -> None:
        super().__init__(message, raw_body)
        self.message = message
        self.raw_body = raw_body

    def __str__(self) -> str:
        return self.message


class ApiError(GitHubApiError):
    def __init__(
        self, message: str, route: str, status_code: int | None = None
    ) -> None:
        super().__init__(message, route, status_code)
        self.message = message
        self.route = route
        self.status_code = status_code

    def __str__(self) -> str:
        if self.status_code is None:
            return f"{self.message} (route={self.route})"
        return f"{self.message} (route={self.route}, status={self.status_code})"


class ApiNotFoundError(GitHubApiError, LookupError):
    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"No API registered under {self.name!r}"
