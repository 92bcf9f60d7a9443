import logging
from datetime import datetime
from typing import Any, Callable, Dict, List, NamedTuple

__all__ = ['LEDGER_CHANGED', 'Event', 'EventBus', 'Handler', 'log_change_handler']

logger = logging.getLogger(__name__)

LEDGER_CHANGED = "LEDGER_CHANGED"


class Event(NamedTuple):
    name: str
    ts: str
    payload: dict


Handler = Callable[[Event, dict], Any]


class EventBus:
    def __init__(self):
        self._subscribers: Dict[str, List[Handler]] = {}

    def subscribe(self, name: str, handler: Handler) -> None:
        if name not in self._subscribers:
            self._subscribers[name] = []
        self._subscribers[name].append(handler)

    def publish(self, name: str, payload: dict) -> List[Any]:
        if name not in self._subscribers:
            return []

        event = Event(
            name=name,
            ts=datetime.now().isoformat(),
            payload=payload
        )

        # copy so a handler may unsubscribe itself while being notified
        return [handler(event, payload) for handler in list(self._subscribers[name])]

    def unsubscribe(self, name: str, handler: Handler) -> None:
        if name in self._subscribers:
            if handler in self._subscribers[name]:
                self._subscribers[name].remove(handler)


def log_change_handler(event: Event, payload: dict) -> dict:
    snapshot = payload["snapshot"]
    summary = {
        "operation": payload["operation"],
        "categories": len(snapshot.categories),
        "months": len(snapshot.months),
    }
    logger.debug("%s at %s: %s", event.name, event.ts, summary)
    return summary
