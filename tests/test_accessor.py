"""Tests for the process-wide store accessor."""

import logging

import pytest

from unistore import ConfigurationError, Store, accessor

from ._actions import Increment, Noop


class TestInstance:
    def test_lazy_and_stable(self):
        store = accessor.instance()

        assert isinstance(store, Store)
        assert accessor.instance() is store
        assert dict(store.state) == {}

    def test_reset_drops_instance(self):
        store = accessor.instance()
        accessor.reset()

        assert accessor.instance() is not store

    def test_reset_gives_empty_state(self):
        accessor.with_state({"a": 1})
        accessor.reset()

        assert accessor.get_state() == {}

    def test_with_state_replaces_instance(self):
        old = accessor.instance()
        new = accessor.with_state({"count": 3})

        assert new is not old
        assert accessor.instance() is new
        assert accessor.get_state() == {"count": 3}

    def test_lifecycle_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="unistore.accessor"):
            accessor.instance()
            accessor.with_state({"a": 1})
            accessor.reset()

        messages = [record.getMessage() for record in caplog.records]
        assert messages == [
            "Creating process-wide store",
            "Replacing process-wide store (1 keys)",
            "Resetting process-wide store",
        ]


class TestForwarding:
    def test_full_pipeline(self):
        accessor.with_state({"count": 0})
        log = []

        accessor.reduce(Increment, "count", lambda c, a: c + a.amount)
        accessor.reduce_and_merge(Noop, None, lambda s, a, state: {"reset": True})
        accessor.before(lambda store, action: log.append("before"))
        accessor.after(lambda prev, new, action: log.append("after"))
        subscriber_id = accessor.subscribe(lambda: log.append("observer"))

        assert accessor.dispatch(Increment(amount=2)) == {"count": 2}
        assert log == ["before", "after", "observer"]

        accessor.unsubscribe(subscriber_id)
        accessor.dispatch(Noop())

        assert accessor.get_state() == {"reset": True}
        assert log == ["before", "after", "observer", "before", "after"]

    def test_when_merging(self):
        accessor.when_merging(lambda old, new, key: {"custom": new})
        accessor.reduce(Increment, "count", lambda c, a: 1)

        accessor.dispatch(Increment())
        assert accessor.get_state() == {"custom": 1}

    def test_forwards_to_current_instance(self):
        accessor.reduce(Increment, "count", lambda c, a: 1)
        accessor.with_state({"count": 0})

        accessor.dispatch(Increment())
        assert accessor.get_state() == {"count": 0}

    def test_registration_errors_propagate(self):
        with pytest.raises(ConfigurationError):
            accessor.reduce(Increment)

        with pytest.raises(ConfigurationError):
            accessor.subscribe(None)

        with pytest.raises(ConfigurationError):
            accessor.when_merging(None)

    def test_chaining_returns_instance(self):
        assert accessor.before(None) is accessor.instance()
