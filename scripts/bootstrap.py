"""Shared setup for scripts run directly from a checkout.

Puts the project root on sys.path so `config` and `gigmatch` import without
an install, then exposes the settings and service factory the CLI needs.
"""
import sys
from pathlib import Path

_project_root = Path(__file__).parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from config.settings import settings
from gigmatch.matching.service import get_matching_service

__all__ = ["settings", "get_matching_service"]
