# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Client-credentials AuthProvider for the Fuel auth endpoint."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from ..config import RestSettings, load_rest_settings
from ..errors import AuthConfigurationError, AuthenticationError
from ..http.client import HttpClient, create_default_http_client
from ..http.models import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


class FuelAuthClient:
    """
    Exchanges a client id/secret pair for an access token.

    Recognized configuration keys: ``clientId`` and ``clientSecret`` (required),
    ``authUrl``, ``accountId`` and ``scope`` (optional). Tokens are requested on
    every call; nothing is cached.
    """

    def __init__(
        self,
        auth_options: Mapping[str, Any] | None,
        *,
        http_client: HttpClient | None = None,
        settings: RestSettings | None = None,
    ):
        if not isinstance(auth_options, Mapping):
            raise AuthConfigurationError("auth options must be a mapping")
        client_id = auth_options.get("clientId")
        client_secret = auth_options.get("clientSecret")
        if not client_id or not client_secret:
            raise AuthConfigurationError("clientId or clientSecret is missing or invalid")

        self.settings = settings or load_rest_settings()
        self.client_id = str(client_id)
        self.client_secret = str(client_secret)
        self.auth_url = str(auth_options.get("authUrl") or self.settings.auth_url)
        self.account_id = auth_options.get("accountId")
        self.scope = auth_options.get("scope")
        self._owns_client = http_client is None
        self.http_client = http_client or create_default_http_client(self.settings)

    def _payload(self, auth_options: Mapping[str, Any]) -> dict[str, Any]:
        payload: dict[str, Any] = {"clientId": self.client_id, "clientSecret": self.client_secret}
        if self.account_id:
            payload["accountId"] = self.account_id
        scope = auth_options.get("scope") or self.scope
        if scope:
            payload["scope"] = scope
        return payload

    def get_access_token(self, auth_options: Mapping[str, Any] | None = None) -> Mapping[str, Any]:
        request = HttpRequest(
            url=self.auth_url,
            method="POST",
            headers={"Content-Type": "application/json", "User-Agent": self.settings.user_agent},
            json=self._payload(auth_options or {}),
        )
        logger.debug("Requesting access token from %s", self.auth_url)
        response = self.http_client.request(request)
        return self._parse_token_response(response)

    @staticmethod
    def _parse_token_response(response: HttpResponse) -> Mapping[str, Any]:
        if not response.ok:
            raise AuthenticationError(response.error_message or "Token request failed", res=response)

        status = response.status_code or 0
        if status >= 400:
            raise AuthenticationError(f"Token request returned HTTP {status}", res=response)

        try:
            body = json.loads(response.text)
        except ValueError as exc:
            raise AuthenticationError("Token endpoint did not return JSON", res=response) from exc

        if not isinstance(body, Mapping):
            raise AuthenticationError("Token endpoint returned an unexpected payload", res=response)
        return body

    def close(self) -> None:
        if self._owns_client:
            self.http_client.close()


__all__ = ["FuelAuthClient"]
