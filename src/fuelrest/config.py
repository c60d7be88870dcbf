# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for fuelrest."""

import os
from dataclasses import dataclass

from .version import __version__

DEFAULT_REST_ENDPOINT = "https://www.exacttargetapis.com"
DEFAULT_AUTH_URL = "https://auth.exacttargetapis.com/v1/requestToken"
DEFAULT_USER_AGENT = f"fuelrest-python/{__version__}"


def _float_env(name: str, default: float) -> float:
    try:
        value = os.getenv(name)
        return float(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


@dataclass
class RestSettings:
    """Client and transport defaults."""

    rest_endpoint: str = DEFAULT_REST_ENDPOINT
    auth_url: str = DEFAULT_AUTH_URL
    timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT
    allow_redirects: bool = True
    verify_ssl: bool = True

    @classmethod
    def from_env(cls) -> "RestSettings":
        """Create settings from environment variables (evaluated at call time)."""
        return cls(
            rest_endpoint=_str_env("FUELREST_ENDPOINT", cls.rest_endpoint),
            auth_url=_str_env("FUELREST_AUTH_URL", cls.auth_url),
            timeout=_float_env("FUELREST_HTTP_TIMEOUT", cls.timeout),
            user_agent=_str_env("FUELREST_USER_AGENT", cls.user_agent),
            allow_redirects=_bool_env("FUELREST_HTTP_REDIRECTS", cls.allow_redirects),
            verify_ssl=_bool_env("FUELREST_HTTP_VERIFY_SSL", cls.verify_ssl),
        )


def load_rest_settings() -> RestSettings:
    """Load client settings from environment with sensible defaults."""
    return RestSettings.from_env()
