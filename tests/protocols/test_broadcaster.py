# Copyright (c) 2023-2025, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Tests for EventChannel (rightcollection/protocols/generic/broadcaster.py)."""

import gc
import logging

import pytest

from rightcollection.protocols.generic.broadcaster import EventChannel, Subscription


class _Evt:
    def __init__(self, value=None):
        self.value = value


@pytest.fixture
def channel():
    return EventChannel("test", event_type=_Evt, on_error="log")


# ---------------------------------------------------------------------------
# subscribe
# ---------------------------------------------------------------------------


class TestSubscribe:
    def test_returns_token(self, channel):
        token = channel.subscribe(lambda e: None)
        assert isinstance(token, Subscription)
        assert token.channel == "test"
        assert channel.subscriber_count == 1

    def test_tokens_are_unique(self, channel):
        def handler(e):
            pass

        t1 = channel.subscribe(handler)
        t2 = channel.subscribe(handler)
        assert t1 != t2
        assert channel.subscriber_count == 2

    def test_rejects_non_callable(self, channel):
        with pytest.raises(TypeError):
            channel.subscribe("not callable")

    def test_builtin_bound_method_is_accepted(self, channel):
        received = []
        channel.subscribe(received.append)
        channel.emit(_Evt(1))
        assert len(received) == 1


# ---------------------------------------------------------------------------
# unsubscribe
# ---------------------------------------------------------------------------


class TestUnsubscribe:
    def test_by_token(self, channel):
        token = channel.subscribe(lambda e: None)
        assert channel.unsubscribe(token) is True
        assert channel.subscriber_count == 0

    def test_by_token_twice(self, channel):
        token = channel.subscribe(lambda e: None)
        channel.unsubscribe(token)
        assert channel.unsubscribe(token) is False

    def test_by_callback_removes_first_registration(self, channel):
        calls = []

        def handler(e):
            calls.append(e)

        channel.subscribe(handler)
        channel.subscribe(handler)
        assert channel.unsubscribe(handler) is True
        channel.emit(_Evt())
        assert len(calls) == 1

    def test_bound_method_by_callback(self, channel):
        class Listener:
            def __init__(self):
                self.seen = []

            def on_event(self, e):
                self.seen.append(e)

        listener = Listener()
        channel.subscribe(listener.on_event)
        assert channel.unsubscribe(listener.on_event) is True
        channel.emit(_Evt())
        assert listener.seen == []

    def test_unknown_is_noop(self, channel):
        assert channel.unsubscribe(lambda e: None) is False
        assert channel.unsubscribe(Subscription(channel="test")) is False

    def test_clear(self, channel):
        channel.subscribe(lambda e: None)
        channel.clear()
        assert channel.subscriber_count == 0


# ---------------------------------------------------------------------------
# emit
# ---------------------------------------------------------------------------


class TestEmit:
    def test_registration_order(self, channel):
        order = []
        channel.subscribe(lambda e: order.append("first"))
        channel.subscribe(lambda e: order.append("second"))
        channel.subscribe(lambda e: order.append("third"))
        channel.emit(_Evt())
        assert order == ["first", "second", "third"]

    def test_passes_event(self, channel):
        received = []
        channel.subscribe(lambda e: received.append(e.value))
        channel.emit(_Evt(42))
        assert received == [42]

    def test_wrong_event_type(self, channel):
        with pytest.raises(ValueError):
            channel.emit("not an event")

    def test_untyped_channel_accepts_anything(self):
        channel = EventChannel("any")
        received = []
        channel.subscribe(received.append)
        channel.emit("payload")
        assert received == ["payload"]

    def test_subscribe_during_emit_applies_to_next_emit(self, channel):
        late = []

        def register_late(e):
            channel.subscribe(late.append)

        channel.subscribe(register_late)
        channel.emit(_Evt())
        assert late == []
        channel.emit(_Evt())
        assert len(late) == 1


# ---------------------------------------------------------------------------
# error policy
# ---------------------------------------------------------------------------


class TestErrorPolicy:
    def test_log_continues(self, channel, caplog):
        received = []

        def bad(e):
            raise RuntimeError("boom")

        channel.subscribe(bad)
        channel.subscribe(lambda e: received.append(e.value))
        with caplog.at_level(logging.ERROR):
            channel.emit(_Evt("ok"))
        assert received == ["ok"]
        assert "boom" in caplog.text

    def test_raise_propagates(self):
        channel = EventChannel("strict", on_error="raise")
        received = []

        def bad(e):
            raise RuntimeError("boom")

        channel.subscribe(bad)
        channel.subscribe(received.append)
        with pytest.raises(RuntimeError, match="boom"):
            channel.emit("x")
        assert received == []

    def test_default_policy_follows_settings(self, monkeypatch):
        from rightcollection import config
        from rightcollection.config import AppSettings

        monkeypatch.setattr(
            config,
            "settings",
            AppSettings(_env_file=None, RIGHTCOLLECTION_OBSERVER_ERRORS="raise"),
        )
        channel = EventChannel("default")
        assert channel.on_error == "raise"


# ---------------------------------------------------------------------------
# subscriber lifetime
# ---------------------------------------------------------------------------


class _Sink:
    def __init__(self, received):
        self.received = received

    def on_event(self, e):
        self.received.append(e.value)


class TestSubscriberLifetime:
    def test_temporary_bound_method_kept_alive(self, channel):
        received = []
        token = channel.subscribe(_Sink(received).on_event)
        gc.collect()
        assert channel.subscriber_count == 1
        channel.emit(_Evt("kept"))
        assert received == ["kept"]
        assert channel.unsubscribe(token) is True

    def test_weak_bound_method_dropped_after_gc(self, channel):
        listener = _Sink([])
        channel.subscribe(listener.on_event, weak=True)
        assert channel.subscriber_count == 1
        del listener
        gc.collect()
        assert channel.subscriber_count == 0

    def test_weak_flag_ignored_for_functions(self, channel):
        channel.subscribe(lambda e: None, weak=True)
        gc.collect()
        assert channel.subscriber_count == 1

    def test_weak_bound_method_unsubscribe_by_callback(self, channel):
        listener = _Sink([])
        channel.subscribe(listener.on_event, weak=True)
        assert channel.unsubscribe(listener.on_event) is True

    def test_lambda_kept_alive(self, channel):
        channel.subscribe(lambda e: None)
        gc.collect()
        assert channel.subscriber_count == 1
