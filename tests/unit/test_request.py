import logging

import pytest
from pydantic import ValidationError

from github_api.exceptions import ApiError, DecodeError


def test_url_is_built_from_route(request_, handler) -> None:
    assert request_.get("/user/show/alice/") == {"ok": True}
    assert str(handler.last.url) == "http://github.com/api/v2/json/user/show/alice"


def test_get_parameters_go_to_query(request_, handler) -> None:
    request_.get("issues/list/alice/project/open", {"page": 3})
    assert handler.last.url.params["page"] == "3"


def test_post_parameters_go_to_body(request_, handler) -> None:
    request_.post("issues/open/alice/project", {"title": "Bug", "body": "Broken"})
    assert handler.last.method == "POST"
    assert handler.last_form() == {"title": "Bug", "body": "Broken"}


def test_credentials_added_to_get(request_, handler) -> None:
    request_.set_option("login", "alice").set_option("token", "secret")
    request_.get("user/show/alice")
    params = handler.last.url.params
    assert params["login"] == "alice"
    assert params["token"] == "secret"


def test_credentials_added_to_post(request_, handler) -> None:
    request_.set_option("login", "alice").set_option("token", "secret")
    request_.post("user/follow/bob")
    assert handler.last_form() == {"login": "alice", "token": "secret"}


def test_no_credentials_without_login(request_, handler) -> None:
    request_.get("user/show/alice")
    assert "login" not in handler.last.url.params
    assert "token" not in handler.last.url.params


def test_set_option_is_fluent_and_keeps_unknown_keys(request_) -> None:
    assert request_.set_option("api_version", "v2") is request_
    assert request_.get_option("api_version") == "v2"
    assert request_.get_option("missing", "fallback") == "fallback"


def test_set_option_validates(request_) -> None:
    with pytest.raises(ValidationError):
        request_.set_option("format", "xml")


def test_user_agent_sent(request_, handler) -> None:
    request_.set_option("user_agent", "tests/1.0")
    request_.get("user/show/alice")
    assert handler.last.headers["User-Agent"] == "tests/1.0"


def test_per_call_options_apply_once(request_, handler) -> None:
    handler.respond(200, "raw blob content")
    raw = request_.get("blob/show/a/b/sha", options={"format": "text"})
    assert raw == "raw blob content"
    assert str(handler.last.url) == "http://github.com/api/v2/text/blob/show/a/b/sha"
    assert request_.get_option("format") == "json"


def test_invalid_json_raises_decode_error(request_, handler) -> None:
    handler.respond(200, "<html>oops</html>")
    with pytest.raises(DecodeError) as exc_info:
        request_.get("user/show/alice")
    assert exc_info.value.raw_body == "<html>oops</html>"


def test_error_field_raises_api_error(request_, handler) -> None:
    handler.respond(200, '{"error": "user not found"}')
    with pytest.raises(ApiError) as exc_info:
        request_.get("user/show/nobody")
    assert exc_info.value.message == "user not found"
    assert exc_info.value.route == "user/show/nobody"


def test_wrapped_error_list(request_, handler) -> None:
    handler.respond(200, '{"error": [{"error": "repository not found"}]}')
    with pytest.raises(ApiError, match="repository not found"):
        request_.get("repos/show/alice/missing")


def test_error_status_raises_api_error(request_, handler) -> None:
    handler.respond(401, '{"error": "not authorized"}')
    with pytest.raises(ApiError) as exc_info:
        request_.post("user/follow/bob")
    assert exc_info.value.status_code == 401
    assert exc_info.value.message == "not authorized"
    assert exc_info.value.route == "user/follow/bob"


def test_error_status_with_unparseable_body(request_, handler) -> None:
    handler.respond(502, "Bad Gateway")
    with pytest.raises(ApiError) as exc_info:
        request_.get("user/show/alice")
    assert exc_info.value.status_code == 502
    assert exc_info.value.message == "Bad Gateway"


def test_created_status_is_success(request_, handler) -> None:
    handler.respond(201, '{"issue": {"number": 7}}')
    assert request_.post("issues/open/alice/project") == {"issue": {"number": 7}}


def test_list_payload_returned_unchanged(request_, handler) -> None:
    handler.respond(200, '[1, {"a": [2, 3]}]')
    assert request_.get("some/list") == [1, {"a": [2, 3]}]


def test_debug_logs_at_info_with_token_masked(request_, handler, caplog) -> None:
    request_.set_option("debug", True)
    request_.set_option("login", "alice").set_option("token", "secret")
    with caplog.at_level(logging.INFO, logger="github_api.services.request"):
        request_.get("user/show/alice")
    assert "user/show/alice" in caplog.text
    assert "secret" not in caplog.text
    assert "***" in caplog.text


def test_quiet_without_debug(request_, handler, caplog) -> None:
    with caplog.at_level(logging.INFO, logger="github_api.services.request"):
        request_.get("user/show/alice")
    assert caplog.text == ""


def test_caller_parameters_override_credentials(request_, handler) -> None:
    request_.set_options({"login": "alice", "token": "secret"})
    request_.get("user/show/alice", {"login": "bob"})
    assert handler.last.url.params["login"] == "bob"
    assert handler.last.url.params["token"] == "secret"

    request_.post("user/follow/carol", {"token": "other"})
    assert handler.last_form() == {"login": "alice", "token": "other"}


def test_set_options_is_all_or_nothing(request_) -> None:
    request_.set_options({"login": "alice", "token": "secret"})
    with pytest.raises(ValidationError):
        request_.set_options({"login": "bob", "format": "xml"})
    assert request_.get_option("login") == "alice"
    assert request_.get_option("format") == "json"


def test_text_format_error_status_raises(request_, handler) -> None:
    handler.respond(404, "Not Found")
    with pytest.raises(ApiError) as exc_info:
        request_.get("blob/show/a/b/missing", options={"format": "text"})
    assert exc_info.value.status_code == 404
    assert exc_info.value.message == "Not Found"
    assert exc_info.value.route == "blob/show/a/b/missing"
