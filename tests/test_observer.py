"""Tests for change notification."""

import pytest

from volcurve.observer import Observable


def test_notifies_in_registration_order():
    observable = Observable()
    calls = []
    observable.register_observer(lambda: calls.append("first"))
    observable.register_observer(lambda: calls.append("second"))

    observable.notify_observers()

    assert calls == ["first", "second"]


def test_duplicate_registration_is_ignored():
    observable = Observable()
    calls = []

    def listener():
        calls.append(1)

    observable.register_observer(listener)
    observable.register_observer(listener)
    observable.notify_observers()

    assert observable.observer_count == 1
    assert calls == [1]


def test_unregister():
    observable = Observable()
    calls = []
    handle = observable.register_observer(lambda: calls.append(1))

    assert observable.unregister_observer(handle)
    assert not observable.unregister_observer(handle)
    observable.notify_observers()

    assert calls == []


def test_listener_may_unregister_during_notification():
    observable = Observable()
    calls = []

    def once():
        calls.append("once")
        observable.unregister_observer(once)

    observable.register_observer(once)
    observable.register_observer(lambda: calls.append("always"))

    observable.notify_observers()
    observable.notify_observers()

    assert calls == ["once", "always", "always"]


def test_rejects_non_callables():
    with pytest.raises(TypeError):
        Observable().register_observer("not callable")
