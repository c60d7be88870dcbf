# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""URL helpers."""

from __future__ import annotations

from urllib.parse import urljoin


def resolve_uri(base_uri: str | None, uri: str | None) -> str:
    """
    Resolve ``uri`` against ``base_uri`` with standard reference resolution.

    Example:
      https://host.example/ + /messages -> https://host.example/messages
      https://host.example/ + https://other.example/x -> https://other.example/x
    """
    base = str(base_uri or "")
    ref = str(uri or "")
    if not base:
        return ref
    return urljoin(base, ref)


__all__ = ["resolve_uri"]
