"""Web form serving the generator in a browser."""

from .app import create_app

__all__ = ["create_app"]
