"""Helpers for SDK version management: versions, archives, downloads and .tool-versions files."""

__version__ = "0.6.1"