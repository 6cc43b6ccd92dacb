"""Configuration domain exports."""

from .loader import ConfigurationError, load_settings
from .runtime_settings import LintSettings, OutputFormat

__all__ = [
    "LintSettings",
    "OutputFormat",
    "ConfigurationError",
    "load_settings",
]
