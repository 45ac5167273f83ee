"""Google Calendar tools exposed over the Model Context Protocol."""

from __future__ import annotations

from .cli import main as main

__all__ = ["main"]
