import unittest

from chefmate.domain.ShoppingList import ShoppingListItem
from chefmate.events import web_observers
from chefmate.events.Event_Bus import EventBus, SHOPPING_LIST_GENERATED
from chefmate.events.event_helpers import publish_shopping_list_generated


class TestEventBus(unittest.TestCase):

    def test_subscribe_publish_unsubscribe(self):
        bus = EventBus()
        received = []
        handler = lambda name, payload: received.append((name, payload))
        bus.subscribe("x", handler)
        bus.subscribe("x", handler)
        bus.publish("x", 1)
        bus.unsubscribe("x", handler)
        bus.publish("x", 2)
        self.assertEqual(received, [("x", 1)])

    def test_failing_subscriber_does_not_stop_others(self):
        bus = EventBus()
        received = []

        def broken(name, payload):
            raise RuntimeError("boom")

        bus.subscribe("x", broken)
        bus.subscribe("x", lambda name, payload: received.append(payload))
        with self.assertLogs("chefmate.events.Event_Bus", level="ERROR"):
            bus.publish("x", 1)
        self.assertEqual(received, [1])

    def test_web_observer_records_generated_lists(self):
        web_observers.start()
        cursor = web_observers.get_events()['next_cursor']
        items = [
            ShoppingListItem("milk", 1, "cup", ["A"], "dairy"),
            ShoppingListItem("butter", 1, "tbsp", ["A"], "dairy"),
        ]
        publish_shopping_list_generated("p1", items)
        events = web_observers.get_events(since=cursor)['events']
        self.assertEqual(len(events), 1)
        self.assertEqual(events[0]['type'], SHOPPING_LIST_GENERATED)
        self.assertEqual(events[0]['plan_id'], "p1")
        self.assertEqual(events[0]['count'], 2)
        self.assertEqual(events[0]['categories'], {"dairy": 2})
