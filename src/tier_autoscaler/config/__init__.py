"""
Configuration module for decision engine settings
"""

from .settings import Settings, settings, LoggingSettings, DecisionSettings

__all__ = [
    "Settings",
    "settings",
    "LoggingSettings",
    "DecisionSettings"
]
