import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Self

from github_api.config import RequestOptions
from github_api.exceptions import ApiError, DecodeError
from github_api.services.transport import HttpTransport, TransportResponse

logger = logging.getLogger(__name__)

SUCCESS_STATUSES = frozenset({200, 201})


@dataclass
class GitHubApiRequest:
    """Sends authenticated calls to the API and decodes what comes back.

    Credentials and the other options are stored on the instance and apply to
    every call until changed. Options passed to a single call only apply to
    that call.
    """

    options: RequestOptions = field(default_factory=RequestOptions)
    transport: HttpTransport = field(default_factory=HttpTransport)

    def set_option(self, key: str, value: Any) -> Self:
        return self.set_options({key: value})

    def set_options(self, options: Mapping[str, Any]) -> Self:
        """Store several options at once; nothing is stored if any is invalid."""
        self.options = self._merged_options(options)
        return self

    def get_option(self, key: str, default: Any = None) -> Any:
        return self.options.model_dump().get(key, default)

    def get(
        self,
        route: str,
        parameters: Mapping[str, Any] | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> Any:
        return self.send(route, parameters, "GET", options)

    def post(
        self,
        route: str,
        parameters: Mapping[str, Any] | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> Any:
        return self.send(route, parameters, "POST", options)

    def send(
        self,
        route: str,
        parameters: Mapping[str, Any] | None = None,
        http_method: str = "GET",
        options: Mapping[str, Any] | None = None,
    ) -> Any:
        opts = self._merged_options(options)
        url = opts.build_url(route)
        params = self._with_credentials(opts, parameters)
        level = logging.INFO if opts.debug else logging.DEBUG

        logger.log(level, "%s %s params=%s", http_method, url, _masked(params))
        response = self.transport.execute(
            http_method, url, params, user_agent=opts.user_agent, timeout=opts.timeout
        )
        logger.log(level, "%s %s -> %s", http_method, url, response.status_code)

        return self._decode(response, route, opts.format)

    def _merged_options(self, options: Mapping[str, Any] | None) -> RequestOptions:
        if not options:
            return self.options
        return RequestOptions.model_validate({**self.options.model_dump(), **options})

    @staticmethod
    def _with_credentials(
        opts: RequestOptions, parameters: Mapping[str, Any] | None
    ) -> dict[str, Any]:
        params: dict[str, Any] = {}
        if opts.login:
            params["login"] = opts.login
            params["token"] = opts.token
        params.update(parameters or {})
        return params

    @staticmethod
    def _decode(response: TransportResponse, route: str, fmt: str) -> Any:
        success = response.status_code in SUCCESS_STATUSES

        if fmt == "text":
            if not success:
                raise ApiError(response.body, route, response.status_code)
            return response.body

        try:
            payload = json.loads(response.body)
        except ValueError as exc:
            if not success:
                raise ApiError(response.body, route, response.status_code) from exc
            raise DecodeError(
                f"Invalid JSON returned for {route}: {exc}", response.body
            ) from exc

        has_error = isinstance(payload, dict) and "error" in payload
        if not success:
            raise ApiError(
                _error_message(payload["error"]) if has_error else response.body,
                route,
                response.status_code,
            )
        if has_error:
            raise ApiError(
                _error_message(payload["error"]), route, response.status_code
            )

        return payload


def _error_message(error: Any) -> str:
    # v2 sometimes wraps the message: {"error": [{"error": "not found"}]}
    if isinstance(error, list):
        return "; ".join(_error_message(item) for item in error)
    if isinstance(error, dict):
        return str(error.get("error", error))
    return str(error)


def _masked(params: Mapping[str, Any]) -> dict[str, Any]:
    if "token" not in params:
        return dict(params)
    return {**params, "token": "***"}
