# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy for fuelrest.

Request failures are not raised out of the verb methods. They are instantiated
here and handed to the caller's callback, stamped with the collaborator they
came from in ``error_propagated_from``.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

ORIGIN_AUTH_PROVIDER = "AuthProvider"
ORIGIN_TRANSPORT = "transport layer error"
ORIGIN_REST_CLIENT = "REST client"


class ErrorCategory(str, Enum):
    TIMEOUT = "TIMEOUT"
    SSL_ERROR = "SSL_ERROR"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    DNS_ERROR = "DNS_ERROR"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


_TIMEOUT_TYPES = {
    "TimeoutException",
    "ConnectTimeout",
    "ReadTimeout",
    "WriteTimeout",
    "PoolTimeout",
    "TimeoutError",
    "timeout",
}
_CONNECTION_TYPES = {
    "ConnectError",
    "NetworkError",
    "ReadError",
    "WriteError",
    "RemoteProtocolError",
    "ProxyError",
    "ConnectionError",
    "ConnectionRefusedError",
    "ConnectionResetError",
}
_SSL_TYPES = {"SSLError", "SSLCertVerificationError", "CertificateError"}
_DNS_TYPES = {"gaierror", "herror"}


def categorize_error_type(error_type: str | None) -> ErrorCategory:
    """Map the class name of a transport exception to an ErrorCategory."""
    name = str(error_type or "")
    if name in _TIMEOUT_TYPES:
        return ErrorCategory.TIMEOUT
    if name in _SSL_TYPES:
        return ErrorCategory.SSL_ERROR
    if name in _DNS_TYPES:
        return ErrorCategory.DNS_ERROR
    if name in _CONNECTION_TYPES:
        return ErrorCategory.CONNECTION_ERROR
    return ErrorCategory.UNKNOWN_ERROR


class FuelRestError(Exception):
    """
    Base exception for all errors produced by ``fuelrest``.

    Attributes:
        error_propagated_from: Name of the collaborator the failure came from,
            stamped when the error is delivered.
        res: Auxiliary data (raw token result or HTTP response) when available.
    """

    def __init__(self, message: str, *, res: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.res = res
        self.error_propagated_from: str | None = None


class AuthenticationError(FuelRestError):
    """The AuthProvider failed or returned no access token."""


class TransportError(FuelRestError):
    """The HTTP transport failed before a response was received."""

    def __init__(self, message: str, *, error_type: str | None = None, res: Any = None) -> None:
        super().__init__(message, res=res)
        self.error_type = error_type
        self.category = categorize_error_type(error_type)


class ContentTypeError(FuelRestError):
    """The API answered with something other than application/json."""


class ClientConfigurationError(FuelRestError):
    """RestClient could not be constructed."""


class AuthConfigurationError(FuelRestError):
    """The authentication configuration is incomplete or malformed."""


__all__ = [
    "AuthConfigurationError",
    "AuthenticationError",
    "ClientConfigurationError",
    "ContentTypeError",
    "ErrorCategory",
    "FuelRestError",
    "ORIGIN_AUTH_PROVIDER",
    "ORIGIN_REST_CLIENT",
    "ORIGIN_TRANSPORT",
    "TransportError",
    "categorize_error_type",
]
