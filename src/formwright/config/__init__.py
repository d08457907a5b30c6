"""Configuration module for formwright."""

from formwright.config.models import FieldConfig, FormConfig, FormwrightConfig

__all__ = ["FormwrightConfig", "FormConfig", "FieldConfig"]
