# Configuration package
"""
Configuration package for the checkout API
Exports settings from settings.py for easy import
"""
from .settings import Settings, settings, missing_settings

__all__ = ["Settings", "settings", "missing_settings"]
