"""Structured server logging: the event template catalog and ServerLogger."""

from .event_catalog import EVENT_TEMPLATES, reload_event_templates
from .logger import ServerLogger, logger

__all__ = ["ServerLogger", "logger", "EVENT_TEMPLATES", "reload_event_templates"]
