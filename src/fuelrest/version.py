# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Package version."""

from importlib import metadata as _metadata

try:
    __version__ = _metadata.version("fuelrest")
except _metadata.PackageNotFoundError:  # pragma: no cover - local/checkout usage
    __version__ = "0.0.0"

__all__ = ["__version__"]
