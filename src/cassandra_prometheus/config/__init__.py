"""
Configuration package initialization.

Exports settings classes and the global settings instance for convenient imports.
"""

from .settings import (
    Environment,
    LogLevel,
    MonitoringSettings,
    Settings,
    settings,
)

__all__ = [
    "Settings",
    "settings",
    "Environment",
    "LogLevel",
    "MonitoringSettings",
]
