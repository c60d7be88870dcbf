# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Header utilities.

HTTP header field names are case-insensitive (RFC 9110), while request options
carry headers as plain dicts with whatever casing the caller used. Lookups here
never depend on that casing.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

JSON_MEDIA_TYPE = "application/json"


def _coerce_headers_mapping(headers: Any) -> Mapping[object, object] | None:
    """
    Best-effort coercion of "dict-like" header containers into a Mapping.

    Accepts plain dicts, httpx.Headers, objects exposing ``.items()`` and
    iterables of pairs.
    """
    if not headers:
        return None
    if isinstance(headers, Mapping):
        return headers

    items = getattr(headers, "items", None)
    if callable(items):
        try:
            return dict(items())
        except (TypeError, ValueError):
            pass

    try:
        return dict(headers)
    except (TypeError, ValueError):
        return None


def normalize_headers(headers: Any) -> dict[str, str]:
    """Return a lowercase-keyed copy of a header mapping."""
    coerced = _coerce_headers_mapping(headers)
    if not coerced:
        return {}
    out: dict[str, str] = {}
    for key, value in coerced.items():
        if key is None:
            continue
        name = str(key).strip().lower()
        if not name:
            continue
        out[name] = "" if value is None else str(value)
    return out


def overlay_headers(base: Any, override: Any) -> dict[str, str]:
    """
    Lay ``override`` over ``base``; names match case-insensitively.

    A base header is dropped when the override carries the same name in any
    casing, and the override's own casing is kept.
    """
    overridden = set(normalize_headers(override))
    merged: dict[str, str] = {}
    for key, value in (_coerce_headers_mapping(base) or {}).items():
        if key is None or str(key).strip().lower() in overridden:
            continue
        merged[str(key)] = "" if value is None else str(value)
    for key, value in (_coerce_headers_mapping(override) or {}).items():
        if key is None:
            continue
        merged[str(key)] = "" if value is None else str(value)
    return merged


def has_header(headers: Any, name: str) -> bool:
    """Return True when ``name`` is present (case-insensitively) with a non-empty value."""
    return bool(header_value(headers, name))


def header_value(headers: Any, name: str, default: str = "") -> str:
    """
    Return a header value using case-insensitive key matching.

    Fast-paths common key casings before falling back to a full scan.
    """
    if not headers or not name:
        return default

    coerced = _coerce_headers_mapping(headers)
    if not coerced:
        return default

    lower = str(name).lower()
    for key in (name, lower, lower.title()):
        if key in coerced:
            value = coerced.get(key)
            return default if value is None else str(value).strip()

    for key, value in coerced.items():
        if key is None:
            continue
        if str(key).lower() == lower:
            return default if value is None else str(value).strip()

    return default


def media_type(headers: Any) -> str:
    """Return the lowercased content-type with any ``;`` parameters stripped."""
    raw = header_value(headers, "content-type")
    return raw.split(";", 1)[0].strip().lower()


def content_type_is_json(headers: Any) -> bool:
    """True when the response declares ``application/json`` (parameters ignored)."""
    return media_type(headers) == JSON_MEDIA_TYPE


__all__ = [
    "JSON_MEDIA_TYPE",
    "content_type_is_json",
    "has_header",
    "header_value",
    "media_type",
    "normalize_headers",
    "overlay_headers",
]
