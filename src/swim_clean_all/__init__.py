"""Recursively find and clean build directories of swim projects."""

__version__ = "0.1.0"
