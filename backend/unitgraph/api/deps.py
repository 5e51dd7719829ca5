"""Shared state for the API routes."""

from __future__ import annotations

from unitgraph.config import settings
from unitgraph.core.context import UnitContext

context = UnitContext.from_system_names(settings.systems)
