"""Human texts for ``ServerLogger.log_event``, keyed by ``(domain, action)``.

The texts live in ``event_templates.json`` next to this module, one object
per domain (``app``, ``server``, ``client``, ``irc``) mapping each action to a
``str.format`` template. Non-string entries are ignored.
"""

from __future__ import annotations

import json
from pathlib import Path

TEMPLATES_PATH = Path(__file__).with_name("event_templates.json")

EVENT_TEMPLATES: dict[tuple[str, str], str] = {}


def flatten_templates(raw: object) -> dict[tuple[str, str], str]:
    """Turn ``{domain: {action: text}}`` into ``{(domain, action): text}``."""
    if not isinstance(raw, dict):
        return {}
    return {
        (domain, action): text
        for domain, actions in raw.items()
        if isinstance(actions, dict)
        for action, text in actions.items()
        if isinstance(text, str)
    }


def reload_event_templates(path: Path | None = None) -> None:
    """Replace the catalog contents with the templates found at ``path``.

    The dict is updated in place. A missing or unreadable file leaves a single
    ``("app", "load_error")`` entry and every other event gets a derived text.
    """
    path = path or TEMPLATES_PATH
    try:
        loaded = flatten_templates(json.loads(path.read_text(encoding="utf-8")))
    except FileNotFoundError:
        loaded = {("app", "load_error"): "Event templates file missing"}
    except (OSError, ValueError) as e:
        loaded = {("app", "load_error"): f"Failed to load event templates: {e}"[:200]}
    EVENT_TEMPLATES.clear()
    EVENT_TEMPLATES.update(loaded)


reload_event_templates()

__all__ = ["EVENT_TEMPLATES", "TEMPLATES_PATH", "flatten_templates", "reload_event_templates"]
