from __future__ import annotations

import pytest

from surface_input.runtime.events import EventBus


class _MetricsCollector:
    def __init__(self) -> None:
        self.published = 0
        self.by_topic: dict[str, int] = {}

    def increment_event_publish_count(self, count: int = 1) -> None:
        self.published += count

    def increment_event_publish_topic(self, topic: str, count: int = 1) -> None:
        self.by_topic[topic] = self.by_topic.get(topic, 0) + count


def test_event_bus_publish_invokes_topic_subscribers_in_order() -> None:
    bus = EventBus()
    seen: list[str] = []
    bus.subscribe("keydown", lambda payload: seen.append(f"first:{payload}"))
    bus.subscribe("keyup", lambda payload: seen.append(f"other:{payload}"))
    bus.subscribe("keydown", lambda payload: seen.append(f"second:{payload}"))

    invoked = bus.publish("keydown", 65)

    assert invoked == 2
    assert seen == ["first:65", "second:65"]


def test_event_bus_unsubscribe_stops_dispatch() -> None:
    bus = EventBus()
    seen: list[object] = []
    subscription = bus.subscribe("wheel", seen.append)
    bus.unsubscribe(subscription)
    bus.unsubscribe(subscription)

    invoked = bus.publish("wheel", 1.0)

    assert invoked == 0
    assert seen == []


def test_event_bus_rejects_empty_topic() -> None:
    with pytest.raises(ValueError):
        EventBus().subscribe("", lambda payload: None)


def test_nested_publish_is_delivered_after_current_topic() -> None:
    bus = EventBus()
    seen: list[str] = []
    bus.subscribe("up", lambda payload: bus.publish("derived", payload))
    bus.subscribe("up", lambda payload: seen.append("up"))
    bus.subscribe("derived", lambda payload: seen.append("derived"))

    invoked = bus.publish("up", None)

    assert invoked == 2
    assert seen == ["up", "derived"]


def test_handler_error_propagates_and_bus_recovers() -> None:
    bus = EventBus()
    seen: list[object] = []

    def _boom(payload: object) -> None:
        bus.publish("after", payload)
        raise RuntimeError("boom")

    subscription = bus.subscribe("fail", _boom)
    bus.subscribe("after", seen.append)
    with pytest.raises(RuntimeError):
        bus.publish("fail", 1)
    bus.unsubscribe(subscription)

    assert bus.publish("after", 2) == 1
    assert seen == [2]


def test_event_bus_counts_publishes_when_collector_attached() -> None:
    bus = EventBus()
    metrics = _MetricsCollector()
    bus.set_metrics_collector(metrics)
    bus.subscribe("keydown", lambda payload: None)

    bus.publish("keydown", 1)
    bus.publish("keyup", 1)

    assert metrics.published == 2
    assert metrics.by_topic == {}


def test_event_bus_per_topic_counts_when_enabled() -> None:
    bus = EventBus()
    metrics = _MetricsCollector()
    bus.set_metrics_collector(metrics, per_topic=True)

    bus.publish("clicked", None)
    bus.publish("clicked", None)

    assert metrics.by_topic == {"clicked": 2}
