"""Command line interface for uniconv."""

from .main import app, run

__all__ = ["app", "run"]
