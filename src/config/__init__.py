"""Configuration module."""

from .settings import Settings, ClassifierSettings, get_settings

__all__ = ["Settings", "ClassifierSettings", "get_settings"]
