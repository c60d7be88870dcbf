# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

import logging

import httpx
import pytest

from fuelrest.auth.provider import StaticTokenProvider
from fuelrest.client import ApiOutcome, ApiResult, RestClient
from fuelrest.config import DEFAULT_REST_ENDPOINT, RestSettings
from fuelrest.errors import (
    AuthenticationError,
    ClientConfigurationError,
    ContentTypeError,
    ErrorCategory,
    TransportError,
)
from fuelrest.http.adapters import StubHttpClient
from fuelrest.http.httpx_client import HttpxClient
from fuelrest.http.models import HttpResponse
from fuelrest.version import __version__

BASE = "https://host.example/"


def json_response(text='{"a":1}', content_type="application/json; charset=utf-8", status=200):
    return HttpResponse(ok=True, status_code=status, headers={"content-type": content_type}, text=text)


class Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, error, result):
        self.calls.append((error, result))


class RaisingProvider:
    def __init__(self, exc):
        self.exc = exc

    def get_access_token(self, auth_options=None):  # noqa: ARG002
        raise self.exc


def make_client(http_client=None, provider=None, endpoint=BASE):
    return RestClient(
        rest_endpoint=endpoint,
        auth_provider=provider or StaticTokenProvider("tok"),
        http_client=http_client or StubHttpClient(),
        settings=RestSettings(user_agent="UA/1.0"),
    )


def test_get_delivers_parsed_json_body():
    stub = StubHttpClient({f"{BASE}messages": json_response()})
    client = make_client(stub)
    cb = Recorder()

    outcome = client.get("/messages", {}, cb)

    assert len(cb.calls) == 1
    error, result = cb.calls[0]
    assert error is None
    assert isinstance(result, ApiResult)
    assert result.body == {"a": 1}
    assert result.res.status_code == 200
    assert outcome == ApiOutcome(None, result)


def test_relative_uri_resolves_against_base():
    stub = StubHttpClient({f"{BASE}messages": json_response()})
    make_client(stub).get("/messages")
    assert stub.requests[0].url == "https://host.example/messages"


def test_absolute_uri_overrides_base():
    stub = StubHttpClient({"https://other.example/x": json_response()})
    error, _ = make_client(stub).get("https://other.example/x")
    assert error is None
    assert stub.requests[0].url == "https://other.example/x"


def test_request_options_uri_overrides_configured_base():
    stub = StubHttpClient({"https://alt.example/v2/items": json_response()})
    options = {"requestOptions": {"uri": "https://alt.example/v2/"}}
    error, _ = make_client(stub).get("items", options)
    assert error is None
    assert stub.requests[0].url == "https://alt.example/v2/items"


def test_default_endpoint_used_when_none_given():
    client = RestClient(auth_provider=StaticTokenProvider("tok"), http_client=StubHttpClient(), settings=RestSettings())
    assert client.request_options["uri"] == DEFAULT_REST_ENDPOINT


def test_bearer_token_and_default_headers_are_sent():
    stub = StubHttpClient({f"{BASE}messages": json_response()})
    make_client(stub).get("/messages")
    sent = stub.requests[0]
    assert sent.method == "GET"
    assert sent.headers["Authorization"] == "Bearer tok"
    assert sent.headers["User-Agent"] == "UA/1.0"
    assert sent.headers["Content-Type"] == "application/json"
    assert sent.json is None


def test_caller_headers_win_over_defaults():
    stub = StubHttpClient({f"{BASE}messages": json_response()})
    options = {"requestOptions": {"headers": {"Content-Type": "text/plain", "X-Trace": "1"}}}
    make_client(stub).get("/messages", options)
    sent = stub.requests[0]
    assert sent.headers["Content-Type"] == "text/plain"
    assert sent.headers["X-Trace"] == "1"
    assert sent.headers["User-Agent"] == "UA/1.0"


def test_lowercase_caller_headers_replace_defaults_on_the_wire():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["content-type"] = request.headers.get_list("content-type")
        seen["user-agent"] = request.headers.get_list("user-agent")
        return httpx.Response(200, json={"a": 1})

    transport = HttpxClient(RestSettings(), client=httpx.Client(transport=httpx.MockTransport(handler)))
    options = {"requestOptions": {"headers": {"content-type": "text/plain", "user-agent": "mine"}}}

    error, _ = make_client(transport).post("/messages", {"k": 1}, options)

    assert error is None
    assert seen == {"content-type": ["text/plain"], "user-agent": ["mine"]}


def test_redirects_not_followed_when_disabled_in_settings():
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/x":
            return httpx.Response(302, headers={"Location": f"{BASE}y", "Content-Type": "application/json"}, text="{}")
        return httpx.Response(200, json={"followed": True})

    transport = HttpxClient(
        RestSettings(allow_redirects=False),
        client=httpx.Client(transport=httpx.MockTransport(handler)),
    )

    error, result = make_client(transport).get("/x")

    assert error is None
    assert result.res.status_code == 302
    assert result.body == {}


@pytest.mark.parametrize("header_name", ["Authorization", "authorization"])
def test_caller_authorization_header_is_not_overwritten(header_name):
    stub = StubHttpClient({f"{BASE}messages": json_response()})
    options = {"requestOptions": {"headers": {header_name: "Basic abc"}}}
    error, _ = make_client(stub).get("/messages", options)
    assert error is None
    headers = stub.requests[0].headers
    assert headers[header_name] == "Basic abc"
    assert "Bearer tok" not in headers.values()


def test_auth_options_are_passed_to_provider():
    provider = StaticTokenProvider("tok")
    stub = StubHttpClient({f"{BASE}messages": json_response()})
    make_client(stub, provider).get("/messages", {"authOptions": {"force": True}})
    assert provider.calls == [{"force": True}]


def test_missing_access_token_is_auth_error_with_raw_result():
    stub = StubHttpClient({f"{BASE}messages": json_response()})
    provider = StaticTokenProvider(None, expiresIn=3600)
    cb = Recorder()

    make_client(stub, provider).get("/messages", None, cb)

    error, result = cb.calls[0]
    assert result is None
    assert isinstance(error, AuthenticationError)
    assert str(error) == "No access token"
    assert error.error_propagated_from == "AuthProvider"
    assert error.res == {"expiresIn": 3600}
    assert stub.requests == []


def test_provider_exception_is_delivered_not_raised():
    cb = Recorder()
    client = make_client(provider=RaisingProvider(RuntimeError("auth down")))

    outcome = client.get("/messages", None, cb)

    error, result = cb.calls[0]
    assert result is None
    assert isinstance(error, AuthenticationError)
    assert error.error_propagated_from == "AuthProvider"
    assert isinstance(error.__cause__, RuntimeError)
    assert outcome.error is error


def test_provider_fuelrest_error_passes_through():
    original = AuthenticationError("bad secret")
    error, _ = make_client(provider=RaisingProvider(original)).get("/messages")
    assert error is original
    assert error.error_propagated_from == "AuthProvider"


def test_transport_error_is_tagged():
    stub = StubHttpClient({f"{BASE}messages": HttpResponse(ok=False, error_message="boom", error_type="ConnectError")})
    cb = Recorder()

    make_client(stub).get("/messages", None, cb)

    error, result = cb.calls[0]
    assert result is None
    assert isinstance(error, TransportError)
    assert error.message == "boom"
    assert error.error_propagated_from == "transport layer error"
    assert error.category == ErrorCategory.CONNECTION_ERROR


def test_non_json_content_type_is_rejected():
    stub = StubHttpClient({f"{BASE}page": json_response(text="<html></html>", content_type="text/html")})
    cb = Recorder()

    make_client(stub).get("/page", None, cb)

    error, result = cb.calls[0]
    assert result is None
    assert isinstance(error, ContentTypeError)
    assert str(error) == "API did not return JSON"
    assert error.error_propagated_from == "REST client"
    assert error.res.status_code == 200


def test_missing_content_type_is_rejected():
    stub = StubHttpClient({f"{BASE}page": HttpResponse(ok=True, status_code=204, headers={}, text="")})
    error, result = make_client(stub).get("/page")
    assert isinstance(error, ContentTypeError)
    assert result is None


def test_content_type_match_is_case_insensitive():
    stub = StubHttpClient({f"{BASE}messages": json_response(content_type="Application/JSON;charset=UTF-8")})
    error, result = make_client(stub).get("/messages")
    assert error is None
    assert result.body == {"a": 1}


def test_malformed_json_body_passes_through_raw():
    stub = StubHttpClient({f"{BASE}messages": json_response(text="not-json", content_type="application/json")})
    cb = Recorder()

    make_client(stub).get("/messages", None, cb)

    error, result = cb.calls[0]
    assert error is None
    assert result.body == "not-json"


def test_http_error_status_with_json_is_still_a_result():
    stub = StubHttpClient({f"{BASE}missing": json_response(text='{"message":"nope"}', status=404)})
    error, result = make_client(stub).get("/missing")
    assert error is None
    assert result.res.status_code == 404
    assert result.body == {"message": "nope"}


def test_post_merges_data_over_existing_json():
    stub = StubHttpClient({f"{BASE}x": json_response()})
    options = {"requestOptions": {"json": {"foo": 0, "bar": 2}}}

    make_client(stub).post("/x", {"foo": 1}, options)

    sent = stub.requests[0]
    assert sent.method == "POST"
    assert sent.json == {"foo": 1, "bar": 2}
    assert options == {"requestOptions": {"json": {"foo": 0, "bar": 2}}}


def test_post_with_empty_options():
    stub = StubHttpClient({f"{BASE}x": json_response()})
    make_client(stub).post("/x", {"foo": 1}, {})
    assert stub.requests[0].json == {"foo": 1}


@pytest.mark.parametrize("verb,method", [("put", "PUT"), ("delete", "DELETE")])
def test_body_verbs_use_matching_method(verb, method):
    stub = StubHttpClient({f"{BASE}items/1": json_response()})
    error, _ = getattr(make_client(stub), verb)("/items/1", {"id": 1})
    assert error is None
    assert stub.requests[0].method == method
    assert stub.requests[0].json == {"id": 1}


def test_delete_without_data_sends_no_body():
    stub = StubHttpClient({f"{BASE}items/1": json_response()})
    make_client(stub).delete("/items/1", None, {})
    assert stub.requests[0].json is None


def test_api_request_accepts_any_verb():
    stub = StubHttpClient()
    stub.add(f"{BASE}items", json_response(), method="PATCH")
    error, result = make_client(stub).api_request("PATCH", "/items", {"requestOptions": {"json": [1, 2]}})
    assert error is None
    assert stub.requests[0].method == "PATCH"
    assert stub.requests[0].json == [1, 2]


def test_calls_do_not_mutate_defaults():
    stub = StubHttpClient({f"{BASE}a": json_response(), f"{BASE}b": json_response()})
    client = make_client(stub)
    client.get("/a", {"requestOptions": {"headers": {"Authorization": "Basic x"}}})
    client.get("/b")
    assert "Authorization" not in client.default_headers
    assert dict(client.request_options) == {"uri": BASE}
    assert stub.requests[1].headers["Authorization"] == "Bearer tok"


def test_exactly_one_side_of_outcome_is_populated():
    stub = StubHttpClient(
        {
            f"{BASE}ok": json_response(),
            f"{BASE}html": json_response(content_type="text/html"),
            f"{BASE}down": HttpResponse(ok=False, error_message="down"),
        }
    )
    client = make_client(stub)
    for path in ("/ok", "/html", "/down", "/unstubbed"):
        error, result = client.get(path)
        assert (error is None) != (result is None)


def test_version_is_exposed():
    assert make_client().version == __version__


def test_invalid_auth_configuration_raises_and_logs(caplog):
    stub = StubHttpClient()
    with caplog.at_level(logging.ERROR, logger="fuelrest.client"):
        with pytest.raises(ClientConfigurationError) as ctx:
            RestClient({"clientId": "id"}, BASE, http_client=stub)
    assert "clientSecret" in str(ctx.value)
    assert "Could not create AuthProvider" in caplog.text
    assert stub.closed is False


def test_auth_configuration_builds_fuel_auth_client():
    stub = StubHttpClient()
    client = RestClient({"clientId": "id", "clientSecret": "secret"}, BASE, http_client=stub)
    assert client.auth_client.client_id == "id"
    assert client.auth_client.http_client is stub


def test_context_manager_closes_owned_client_only():
    stub = StubHttpClient()
    with make_client(stub):
        pass
    assert stub.closed is False
