"""Simple Event Bus / Observer implementation for application events.

Event names:
  meal_plan.saved -> payload {"plan_id": str, "meals": int}
  shopping_list.generated -> payload {"plan_id": str | None, "count": int, "categories": {category: int}}
  shopping_list.saved -> payload {"plan_id": str, "count": int}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
MEAL_PLAN_SAVED = "meal_plan.saved"
SHOPPING_LIST_GENERATED = "shopping_list.generated"
SHOPPING_LIST_SAVED = "shopping_list.saved"


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def publish(self, event_name: str, payload: Any):
		# A failing subscriber must not break the request that published the event
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				logger.exception("Error delivering %s to %r", event_name, cb)


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


def publish(event_name: str, payload: Any = None) -> None:
	"""Publish an event on the global bus."""
	GLOBAL_EVENT_BUS.publish(event_name, payload)


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS', 'publish',
	'MEAL_PLAN_SAVED', 'SHOPPING_LIST_GENERATED', 'SHOPPING_LIST_SAVED'
]
