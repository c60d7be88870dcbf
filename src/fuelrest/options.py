# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Request option merging.

Merges are shallow: top-level keys of the override replace those of the base.
The ``headers`` and ``json`` keys are overlaid one level deeper so that callers
can add a header or a body field without restating the defaults. Nothing is
merged recursively past that level, and inputs are never mutated.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

REQUEST_OPTIONS_KEY = "requestOptions"
AUTH_OPTIONS_KEY = "authOptions"
_OVERLAID_KEYS = ("headers", "json")


def shallow_merge(base: Mapping[str, Any] | None, override: Mapping[str, Any] | None) -> dict[str, Any]:
    """Return a new dict with ``override`` keys laid over ``base``."""
    merged: dict[str, Any] = dict(base or {})
    merged.update(override or {})
    return merged


def merge_request_options(defaults: Mapping[str, Any] | None, overrides: Mapping[str, Any] | None) -> dict[str, Any]:
    """Overlay caller request options on the defaults, key-by-key for headers and json."""
    defaults = defaults or {}
    overrides = overrides or {}
    merged = shallow_merge(defaults, overrides)
    for key in _OVERLAID_KEYS:
        base_value = defaults.get(key)
        override_value = overrides.get(key)
        if isinstance(base_value, Mapping) and isinstance(override_value, Mapping):
            merged[key] = shallow_merge(base_value, override_value)
        elif isinstance(merged.get(key), Mapping):
            merged[key] = dict(merged[key])
    return merged


def split_options(options: Mapping[str, Any] | None) -> tuple[dict[str, Any], dict[str, Any]]:
    """Return copies of the ``(requestOptions, authOptions)`` sub-mappings."""
    if not options:
        return {}, {}
    request_options = options.get(REQUEST_OPTIONS_KEY) or {}
    auth_options = options.get(AUTH_OPTIONS_KEY) or {}
    return dict(request_options), dict(auth_options)


def merge_post_data(data: Any, options: Mapping[str, Any] | None) -> dict[str, Any] | None:
    """
    Merge a request body into ``options["requestOptions"]["json"]``.

    Mapping payloads are laid over any existing mapping body with ``data``
    winning per key; any other payload replaces the body. Falsy ``data``
    returns the options unchanged.
    """
    if not data:
        return dict(options) if options is not None else None

    new_options: dict[str, Any] = dict(options or {})
    request_options: dict[str, Any] = dict(new_options.get(REQUEST_OPTIONS_KEY) or {})
    existing = request_options.get("json")

    if isinstance(data, Mapping):
        request_options["json"] = shallow_merge(existing if isinstance(existing, Mapping) else None, data)
    else:
        request_options["json"] = data

    new_options[REQUEST_OPTIONS_KEY] = request_options
    return new_options


__all__ = [
    "AUTH_OPTIONS_KEY",
    "REQUEST_OPTIONS_KEY",
    "merge_post_data",
    "merge_request_options",
    "shallow_merge",
    "split_options",
]
