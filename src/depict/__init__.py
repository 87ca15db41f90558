"""Depict - describe images with Google's generative language API."""

__version__ = "0.1.0"
