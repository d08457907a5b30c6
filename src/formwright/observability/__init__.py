"""Observability module for formwright."""

from formwright.observability.logging import ContextLogger, setup_logging

__all__ = ["ContextLogger", "setup_logging"]
