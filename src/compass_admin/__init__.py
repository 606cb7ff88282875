"""Compass admin CLI - manage onboarding cards and themes from a terminal."""

__version__ = "0.1.0"
