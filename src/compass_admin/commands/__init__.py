"""Compass admin CLI commands."""
