"""
Web application front-end for the calculator.

Provides the calculator page and a JSON API backed by per-session engines.
"""

from .server import app

__all__ = ["app"]
