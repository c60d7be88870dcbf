# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""AuthProvider abstraction."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol


class AuthProvider(Protocol):
    """
    Produces bearer tokens for RestClient.

    ``get_access_token`` returns a token result mapping carrying at least
    ``accessToken`` and raises on failure. ``auth_options`` is passed through
    from the caller untouched.
    """

    def get_access_token(self, auth_options: Mapping[str, Any] | None = None) -> Mapping[str, Any]: ...


class StaticTokenProvider(AuthProvider):
    """AuthProvider returning a fixed token result; records the options it was called with."""

    def __init__(self, access_token: str | None, **extra: Any):
        self._result: dict[str, Any] = dict(extra)
        if access_token is not None:
            self._result["accessToken"] = access_token
        self.calls: list[dict[str, Any]] = []

    def get_access_token(self, auth_options: Mapping[str, Any] | None = None) -> Mapping[str, Any]:
        self.calls.append(dict(auth_options or {}))
        return dict(self._result)


__all__ = ["AuthProvider", "StaticTokenProvider"]
