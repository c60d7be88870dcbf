# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
fuelrest package entrypoint.

A small REST client that obtains bearer tokens from a pluggable AuthProvider,
attaches them to requests against a single API host, and reports every call
through a uniform ``(error, result)`` pair. HTTP behavior is abstracted behind
an injectable client interface.
"""

from .auth import AuthProvider, FuelAuthClient, StaticTokenProvider
from .client import ApiOutcome, ApiResult, RestClient
from .config import RestSettings, load_rest_settings
from .errors import (
    AuthConfigurationError,
    AuthenticationError,
    ClientConfigurationError,
    ContentTypeError,
    ErrorCategory,
    FuelRestError,
    TransportError,
)
from .http import (
    HttpClient,
    HttpRequest,
    HttpResponse,
    HttpxClient,
    StubHttpClient,
    create_default_http_client,
)
from .log import setup_logging
from .version import __version__

__all__ = [
    "ApiOutcome",
    "ApiResult",
    "AuthConfigurationError",
    "AuthProvider",
    "AuthenticationError",
    "ClientConfigurationError",
    "ContentTypeError",
    "ErrorCategory",
    "FuelAuthClient",
    "FuelRestError",
    "HttpClient",
    "HttpRequest",
    "HttpResponse",
    "HttpxClient",
    "RestClient",
    "RestSettings",
    "StaticTokenProvider",
    "StubHttpClient",
    "TransportError",
    "create_default_http_client",
    "load_rest_settings",
    "setup_logging",
    "__version__",
]
