"""Structured event logger for the server."""

from __future__ import annotations

import logging
import os

from .event_catalog import EVENT_TEMPLATES


class ServerLogger:
    """Project logger with lightweight structured event support.

    Conventions:
        * Use logger.log_event(domain="client", action="connected", client=peer, port=6667)
        * log_event builds a canonical event name '<domain>_<action>' and renders
          the human text from the event template catalog, falling back to a
          derived "<domain>: <action>" string.
        * Remaining kwargs are appended as key=value context in debug mode.

    Output goes through the stdlib logger named ``name``; handlers are installed
    once on the root logger by :class:`ircd.logging_config.LoggerConfigurator`.
    """

    def __init__(self, name: str = "ircd") -> None:
        self._event_name_width = 28
        self.logger = logging.getLogger(name)

    def log_event(
        self,
        domain: str,
        action: str,
        level: int = logging.INFO,
        human: str | None = None,
        *,
        exc_info: bool = False,
        **kwargs: object,
    ) -> None:
        event_name = f"{domain}_{action}".lower()
        human_text = human
        derived = False
        if human_text is None:
            template = EVENT_TEMPLATES.get((domain, action))
            if template:
                try:
                    human_text = template.format(**kwargs)
                except (KeyError, IndexError, ValueError):
                    human_text = template
            else:
                human_text = f"{domain.replace('_', ' ')}: {action.replace('_', ' ')}"
                derived = True
        if derived:
            kwargs.setdefault("derived", True)
        self._log(level, event_name, human_text, exc_info=exc_info, **kwargs)

    def _log(
        self,
        level: int,
        event_name: str,
        human_text: str,
        exc_info: bool = False,
        **kwargs: object,
    ) -> None:
        kw: dict[str, object] = dict(kwargs)
        prefix = self._build_prefix(kw.pop("client", None))
        msg = (
            self._build_debug_message(event_name, prefix, human_text, kw)
            if self._is_debug_enabled()
            else f"{prefix} {human_text}"
        )
        self.logger.log(level, msg, exc_info=exc_info)

    @staticmethod
    def _is_debug_enabled() -> bool:
        return os.environ.get("DEBUG", "false").lower() in ("true", "1", "yes")

    @staticmethod
    def _build_prefix(client: object) -> str:
        label = str(client) if client else "server"
        # Fits 'ipv4:port' peers
        return f"[{label.ljust(21)[:21]}]"

    def _build_debug_message(
        self,
        event_name: str,
        prefix: str,
        human_text: str,
        kwargs: dict[str, object],
    ) -> str:
        context = ", ".join(f"{k}={v}" for k, v in kwargs.items())
        width = self._event_name_width
        if len(event_name) <= width:
            ev = event_name.ljust(width)
        else:
            ev = event_name[: width - 1] + "…"
        base = f"{ev} {prefix} {human_text}"
        if context:
            base = f"{base} ({context})"
        return base


logger = ServerLogger()
