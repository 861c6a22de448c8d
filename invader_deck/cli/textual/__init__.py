"""Textual front-end for the Invader board."""

from .app import InvaderTextualApp, run_textual_app

__all__ = ["InvaderTextualApp", "run_textual_app"]
