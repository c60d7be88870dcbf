# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""HTTP request/response data models shared by the client and its transports."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

Headers = dict[str, str]


@dataclass
class HttpRequest:
    """
    Normalized request representation consumed by HttpClient implementations.

    ``timeout`` and ``allow_redirects`` left as None defer to the transport settings.
    """

    url: str
    method: str = "GET"
    headers: Headers | None = None
    json: Any = None
    timeout: float | None = None
    allow_redirects: bool | None = None

    @property
    def has_body(self) -> bool:
        return self.json is not None

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> HttpRequest:
        """Build a request from merged request options (uri, method, headers, json)."""
        return cls(
            url=str(options.get("uri") or ""),
            method=str(options.get("method") or "GET").upper(),
            headers=dict(options.get("headers") or {}),
            json=options.get("json"),
            timeout=options.get("timeout"),
            allow_redirects=options.get("allow_redirects"),
        )


@dataclass
class HttpResponse:
    """Normalized HTTP response. ``ok`` is False only when no response was received."""

    ok: bool
    status_code: int | None = None
    headers: Headers = field(default_factory=dict)
    text: str = ""
    content: bytes = b""
    url: str | None = None
    error_message: str | None = None
    error_type: str | None = None
    meta: dict[str, Any] = field(default_factory=dict)
