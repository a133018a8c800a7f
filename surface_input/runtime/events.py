"""Lightweight topic event bus."""

from __future__ import annotations

from collections import deque

from surface_input.api.events import EventHandler, Subscription


class RuntimeEventBus:
    """Simple in-process pub/sub with run-to-completion delivery.

    A publish issued while handlers are running is queued and delivered once
    the current delivery finishes, before the outermost ``publish`` returns.
    Every subscriber therefore observes topics in the order they were
    published.
    """

    def __init__(self) -> None:
        self._next_id = 1
        self._subscriptions: dict[int, tuple[str, EventHandler]] = {}
        self._pending: deque[tuple[str, object]] = deque()
        self._dispatching = False
        self._metrics_collector: object | None = None
        self._topic_metrics_enabled = False

    def set_metrics_collector(
        self, metrics_collector: object | None, *, per_topic: bool = False
    ) -> None:
        """Attach optional metrics collector used for publish counts."""
        self._metrics_collector = metrics_collector
        self._topic_metrics_enabled = per_topic

    def subscribe(self, topic: str, handler: EventHandler) -> Subscription:
        """Subscribe handler for a topic."""
        if not topic:
            raise ValueError("topic must not be empty")
        sub_id = self._next_id
        self._next_id += 1
        self._subscriptions[sub_id] = (topic, handler)
        return Subscription(sub_id, topic)

    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove a subscription if present."""
        self._subscriptions.pop(subscription.id, None)

    def subscriber_count(self, topic: str) -> int:
        return sum(1 for subscribed, _ in self._subscriptions.values() if subscribed == topic)

    def publish(self, topic: str, payload: object) -> int:
        """Publish one payload and return number of invoked handlers.

        Returns 0 when the publish was queued behind an active delivery.
        """
        self._record_metrics(topic)
        if self._dispatching:
            self._pending.append((topic, payload))
            return 0
        self._dispatching = True
        try:
            invoked = self._deliver(topic, payload)
            while self._pending:
                queued_topic, queued_payload = self._pending.popleft()
                self._deliver(queued_topic, queued_payload)
        finally:
            self._dispatching = False
            self._pending.clear()
        return invoked

    def _deliver(self, topic: str, payload: object) -> int:
        invoked = 0
        for subscribed, handler in tuple(self._subscriptions.values()):
            if subscribed == topic:
                handler(payload)
                invoked += 1
        return invoked

    def _record_metrics(self, topic: str) -> None:
        metrics = self._metrics_collector
        if metrics is None:
            return
        if hasattr(metrics, "increment_event_publish_count"):
            metrics.increment_event_publish_count(1)
        if self._topic_metrics_enabled and hasattr(metrics, "increment_event_publish_topic"):
            metrics.increment_event_publish_topic(topic, 1)


EventBus = RuntimeEventBus
