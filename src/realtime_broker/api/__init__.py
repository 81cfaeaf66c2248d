"""HTTP API for the realtime session broker."""

from .app import create_app

__all__ = ["create_app"]
