# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""httpx-backed HttpClient implementation."""

from __future__ import annotations

import httpx

from ..config import RestSettings, load_rest_settings
from .client import HttpClient
from .headers import normalize_headers
from .models import HttpRequest, HttpResponse


class HttpxClient(HttpClient):
    """Synchronous httpx client wrapper."""

    def __init__(self, settings: RestSettings | None = None, client: httpx.Client | None = None):
        self.settings = settings or load_rest_settings()
        self._client = client or httpx.Client(
            follow_redirects=self.settings.allow_redirects,
            timeout=self.settings.timeout,
            verify=self.settings.verify_ssl,
        )

    def request(self, request: HttpRequest) -> HttpResponse:
        headers = dict(request.headers or {})
        timeout = request.timeout if request.timeout is not None else self.settings.timeout
        follow_redirects = request.allow_redirects if request.allow_redirects is not None else self.settings.allow_redirects

        kwargs = {
            "headers": headers,
            "timeout": timeout,
            "follow_redirects": follow_redirects,
        }
        if request.has_body:
            kwargs["json"] = request.json

        try:
            resp = self._client.request(request.method, request.url, **kwargs)
            content = resp.content
            encoding = resp.encoding or "utf-8"
            try:
                text = content.decode(encoding, errors="replace")
            except LookupError:
                text = content.decode("utf-8", errors="replace")

            return HttpResponse(
                ok=True,
                status_code=resp.status_code,
                headers=normalize_headers(resp.headers),
                text=text,
                content=content,
                url=str(resp.url),
                meta={"reason_phrase": resp.reason_phrase},
            )
        except Exception as exc:  # noqa: BLE001
            return HttpResponse(
                ok=False,
                error_message=str(exc),
                error_type=type(exc).__name__,
            )

    def close(self) -> None:
        self._client.close()
