"""
Web front-end for pocket-calc.

Provides a browser calculator backed by the in-process session.
"""

from .server import app

__all__ = ["app"]
