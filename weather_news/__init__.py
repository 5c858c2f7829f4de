"""Weather & news dashboard package initializer."""

from .config import DashboardConfig
from .dashboard import Dashboard

__all__ = ["Dashboard", "DashboardConfig"]
