"""oho — command-line client for the OpenCode Server HTTP API."""

from __future__ import annotations

__version__ = "1.0.0"
