"""Compass - onboarding cards and themes for embedded experiences."""

__version__ = "0.1.0"
