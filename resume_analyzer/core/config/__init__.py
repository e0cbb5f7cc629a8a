from __future__ import annotations

from .analysis import get_analysis_config, get_analysis_value
from .settings import Settings, settings

__all__ = ["Settings", "settings", "get_analysis_config", "get_analysis_value"]
