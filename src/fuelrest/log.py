# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Logging setup for applications embedding fuelrest.

The library itself only logs through module loggers under ``fuelrest.*``:
DEBUG lines for dispatched requests and token exchanges, and one ERROR when
an AuthProvider cannot be built.
"""

from __future__ import annotations

import logging
import os

DEFAULT_LOG_LEVEL = os.getenv("FUELREST_LOG_LEVEL", "WARNING").upper()


def setup_logging(level: str | None = None) -> None:
    """Configure standard logging for applications embedding the client."""
    effective_level = (level or DEFAULT_LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, effective_level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


__all__ = ["setup_logging"]
