# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
REST client that signs requests with bearer tokens from an AuthProvider.

Every verb runs the same chain: merge options with the instance defaults, ask
the AuthProvider for a token, inject it, dispatch through the HttpClient and
check that the API answered with JSON. Failures are delivered, not raised:
the callback receives ``(error, None)`` or ``(None, ApiResult)`` and the verb
returns the same pair as an ``ApiOutcome``.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, NamedTuple

from .auth.fuel_auth import FuelAuthClient
from .auth.provider import AuthProvider
from .config import RestSettings, load_rest_settings
from .errors import (
    ORIGIN_AUTH_PROVIDER,
    ORIGIN_REST_CLIENT,
    ORIGIN_TRANSPORT,
    AuthenticationError,
    ClientConfigurationError,
    ContentTypeError,
    FuelRestError,
    TransportError,
)
from .http.client import HttpClient, create_default_http_client
from .http.headers import content_type_is_json, has_header, overlay_headers
from .http.models import HttpRequest, HttpResponse
from .http.url import resolve_uri
from .options import merge_post_data, merge_request_options, split_options
from .version import __version__

logger = logging.getLogger(__name__)


@dataclass
class ApiResult:
    """A successful call: the transport response and its parsed (or raw) body."""

    res: HttpResponse
    body: Any


class ApiOutcome(NamedTuple):
    error: FuelRestError | None
    result: ApiResult | None


Callback = Callable[[FuelRestError | None, ApiResult | None], Any]


class RestClient:
    """
    Bearer-token REST client bound to a single API host.

    Example::

        from fuelrest import RestClient

        client = RestClient({"clientId": "...", "clientSecret": "..."})
        error, result = client.get("/platform/v1/endpoints")
        if error is None:
            print(result.body)
    """

    def __init__(
        self,
        auth_options: Mapping[str, Any] | None = None,
        rest_endpoint: str | None = None,
        *,
        auth_provider: AuthProvider | None = None,
        http_client: HttpClient | None = None,
        settings: RestSettings | None = None,
    ):
        self.settings = settings or load_rest_settings()
        self._owns_client = http_client is None
        self.http_client = http_client or create_default_http_client(self.settings)

        if auth_provider is None:
            try:
                auth_provider = FuelAuthClient(auth_options, http_client=self.http_client, settings=self.settings)
            except Exception as exc:
                logger.error("Could not create AuthProvider: %s", exc)
                self.close()
                raise ClientConfigurationError(f"Could not create AuthProvider: {exc}") from exc
        self.auth_client = auth_provider

        self.version = __version__
        self.default_headers: Mapping[str, str] = MappingProxyType(
            {
                "User-Agent": self.settings.user_agent,
                "Content-Type": "application/json",
            }
        )
        self.request_options: Mapping[str, Any] = MappingProxyType(
            {"uri": rest_endpoint or self.settings.rest_endpoint}
        )

    def _build_request_options(self, method: str, uri: str, request_options: Mapping[str, Any]) -> dict[str, Any]:
        merged = merge_request_options(self.request_options, request_options)
        merged["uri"] = resolve_uri(merged.get("uri"), uri)
        merged["method"] = method
        merged["headers"] = overlay_headers(self.default_headers, merged.get("headers"))
        return merged

    def _request_token(self, auth_options: Mapping[str, Any]) -> tuple[FuelRestError | None, str | None]:
        try:
            token_result = self.auth_client.get_access_token(auth_options)
        except FuelRestError as exc:
            return exc, None
        except Exception as exc:  # noqa: BLE001
            error = AuthenticationError(str(exc) or type(exc).__name__)
            error.__cause__ = exc
            return error, None

        access_token = token_result.get("accessToken") if isinstance(token_result, Mapping) else None
        if not access_token:
            return AuthenticationError("No access token", res=token_result), None
        return None, str(access_token)

    def api_request(
        self,
        method: str,
        uri: str,
        options: Mapping[str, Any] | None = None,
        callback: Callback | None = None,
    ) -> ApiOutcome:
        """Run one authenticated request and deliver its outcome."""
        request_options, auth_options = split_options(options)
        request_options = self._build_request_options(method, uri, request_options)

        error, access_token = self._request_token(auth_options)
        if error is not None:
            return self._deliver_response("error", error, callback, ORIGIN_AUTH_PROVIDER)

        headers = request_options["headers"]
        if not has_header(headers, "Authorization"):
            headers["Authorization"] = f"Bearer {access_token}"

        logger.debug("%s %s", method, request_options["uri"])

        response = self.http_client.request(HttpRequest.from_options(request_options))
        if not response.ok:
            error = TransportError(
                response.error_message or "HTTP transport failed",
                error_type=response.error_type,
                res=response,
            )
            return self._deliver_response("error", error, callback, ORIGIN_TRANSPORT)

        if not content_type_is_json(response.headers):
            error = ContentTypeError("API did not return JSON", res=response)
            return self._deliver_response("error", error, callback, ORIGIN_REST_CLIENT)

        try:
            body: Any = json.loads(response.text)
        except ValueError:
            body = response.text

        return self._deliver_response("response", ApiResult(res=response, body=body), callback)

    def get(self, uri: str, options: Mapping[str, Any] | None = None, callback: Callback | None = None) -> ApiOutcome:
        return self.api_request("GET", uri, options, callback)

    def post(
        self,
        uri: str,
        data: Any = None,
        options: Mapping[str, Any] | None = None,
        callback: Callback | None = None,
    ) -> ApiOutcome:
        return self.api_request("POST", uri, merge_post_data(data, options), callback)

    def put(
        self,
        uri: str,
        data: Any = None,
        options: Mapping[str, Any] | None = None,
        callback: Callback | None = None,
    ) -> ApiOutcome:
        return self.api_request("PUT", uri, merge_post_data(data, options), callback)

    def delete(
        self,
        uri: str,
        data: Any = None,
        options: Mapping[str, Any] | None = None,
        callback: Callback | None = None,
    ) -> ApiOutcome:
        return self.api_request("DELETE", uri, merge_post_data(data, options), callback)

    @staticmethod
    def _deliver_response(
        kind: str,
        data: Any,
        callback: Callback | None,
        error_from: str | None = None,
    ) -> ApiOutcome:
        """
        Hand ``data`` to the callback as ``(error, None)`` or ``(None, result)``.

        Errors are stamped in place with ``error_propagated_from``. An exception
        instance a provider raises on more than one call carries the tag of the
        latest delivery.
        """
        if kind == "error":
            if error_from:
                data.error_propagated_from = error_from
            outcome = ApiOutcome(error=data, result=None)
        else:
            outcome = ApiOutcome(error=None, result=data)

        if callback is not None:
            callback(outcome.error, outcome.result)
        return outcome

    def close(self) -> None:
        if self._owns_client:
            self.http_client.close()

    def __enter__(self) -> RestClient:
        return self

    def __exit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        self.close()


__all__ = ["ApiOutcome", "ApiResult", "Callback", "RestClient"]
