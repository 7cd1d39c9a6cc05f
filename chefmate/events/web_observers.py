"""Web-facing observers for application events.

This module subscribes to the GLOBAL_EVENT_BUS for meal plan and shopping list
events and stores a lightweight in-memory ring buffer of recent events that the
web layer exposes at /api/events.

Design:
  * Each event stored with an auto-increment integer id (cursor) so clients
    can request only newer events (since=<last_id_seen>).
  * A Lock guards the buffer; with several worker processes each keeps its own.
  * A MAX_EVENTS cap prevents unbounded memory growth.
"""
from __future__ import annotations
import logging
from typing import List, Dict, Any
from threading import Lock
from datetime import datetime, timezone

from .Event_Bus import (
    GLOBAL_EVENT_BUS, MEAL_PLAN_SAVED, SHOPPING_LIST_GENERATED, SHOPPING_LIST_SAVED
)

logger = logging.getLogger(__name__)

_lock = Lock()
_events: List[Dict[str, Any]] = []
_next_id = 1
MAX_EVENTS = 300
_started = False


def _record(event_name: str, payload: Any):  # signature expected by EventBus
    global _next_id
    with _lock:
        evt = {
            'id': _next_id,
            'type': event_name,
            'ts': datetime.now(timezone.utc).isoformat(),
        }
        if isinstance(payload, dict):
            for k in ('plan_id', 'meals', 'count', 'categories'):
                if k in payload:
                    evt[k] = payload[k]
        _events.append(evt)
        _next_id += 1
        # Trim buffer
        if len(_events) > MAX_EVENTS:
            del _events[: len(_events) - MAX_EVENTS]
    logger.debug("Recorded event %s", event_name)


def start():
    """Idempotent start: subscribe observers once."""
    global _started
    if _started:
        return
    for name in (MEAL_PLAN_SAVED, SHOPPING_LIST_GENERATED, SHOPPING_LIST_SAVED):
        GLOBAL_EVENT_BUS.subscribe(name, _record)
    _started = True


def get_events(since: int | None = None) -> Dict[str, Any]:
    """Return events newer than 'since' (exclusive).

    If since is None, returns the last N (up to MAX_EVENTS) events.
    Response includes next_cursor (largest id) so client can poll with since=next_cursor.
    """
    with _lock:
        if since is None:
            data = list(_events)
        else:
            data = [e for e in _events if e['id'] > since]
        next_cursor = _events[-1]['id'] if _events else since or 0
    return {'events': data, 'next_cursor': next_cursor}


__all__ = ['start', 'get_events']
