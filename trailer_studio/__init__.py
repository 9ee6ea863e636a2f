"""Trailer wrap configurator with AI-rendered previews."""

__version__ = "0.1.0"
