# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP transport exports."""

from .adapters import StubHttpClient
from .client import HttpClient, create_default_http_client
from .headers import (
    content_type_is_json,
    has_header,
    header_value,
    media_type,
    normalize_headers,
    overlay_headers,
)
from .httpx_client import HttpxClient
from .models import Headers, HttpRequest, HttpResponse
from .url import resolve_uri

__all__ = [
    "Headers",
    "HttpClient",
    "HttpxClient",
    "HttpRequest",
    "HttpResponse",
    "StubHttpClient",
    "content_type_is_json",
    "create_default_http_client",
    "has_header",
    "header_value",
    "media_type",
    "normalize_headers",
    "overlay_headers",
    "resolve_uri",
]
