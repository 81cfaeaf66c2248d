"""Realtime session broker: ephemeral OpenAI Realtime credentials for browsers."""

__version__ = "0.1.0"
