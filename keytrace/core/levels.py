"""Severity levels used when forwarding reports to a logger."""

from __future__ import annotations

import logging

TRACE = 5
DEBUG = logging.DEBUG
INFORMATION = logging.INFO

logging.addLevelName(TRACE, "TRACE")
