# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Authentication collaborators."""

from .fuel_auth import FuelAuthClient
from .provider import AuthProvider, StaticTokenProvider

__all__ = ["AuthProvider", "FuelAuthClient", "StaticTokenProvider"]
