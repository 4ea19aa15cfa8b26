"""Web API for gatofit."""

from .app import create_app

__all__ = ["create_app"]
