"""Presentation layer."""

from kioku.presentation.slack_handlers import register_handlers

__all__ = ["register_handlers"]
