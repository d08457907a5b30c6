"""Command line interface for formwright."""
