"""
Tests for the plain store the instrumentation wraps.
"""

import pytest

from instrument import InstrumentError, InvalidActionError, compose, create_store
from instrument.core.actions import STORE_INIT, STORE_REPLACE
from instrument.tests.reducers import SpyReducer, counter, double_counter


def test_init_action_dispatched_on_creation():
    spy = SpyReducer()

    store = create_store(spy, 7)

    assert spy.calls == [(7, {"type": STORE_INIT})]
    assert store.get_state() == 7


def test_dispatch_folds_state():
    store = create_store(counter)

    store.dispatch({"type": "INCREMENT"})
    store.dispatch({"type": "INCREMENT"})

    assert store.get_state() == 2


def test_subscribe_and_unsubscribe():
    store = create_store(counter)
    calls = []
    unsubscribe = store.subscribe(lambda: calls.append(store.get_state()))

    store.dispatch({"type": "INCREMENT"})
    unsubscribe()
    unsubscribe()
    store.dispatch({"type": "INCREMENT"})

    assert calls == [1]


def test_replace_reducer_dispatches_replace():
    store = create_store(counter, 3)
    spy = SpyReducer()

    store.replace_reducer(spy)

    assert spy.calls == [(3, {"type": STORE_REPLACE})]


def test_replace_reducer_applies_to_later_actions():
    store = create_store(counter)
    store.replace_reducer(double_counter)

    store.dispatch({"type": "INCREMENT"})

    assert store.get_state() == 2


def test_invalid_actions_rejected():
    store = create_store(counter)

    with pytest.raises(InvalidActionError):
        store.dispatch({"type": None})
    with pytest.raises(InvalidActionError):
        store.dispatch(["INCREMENT"])


def test_reducers_may_not_dispatch():
    holder = {}

    def reducer(state, action):
        if action["type"] == "NESTED":
            holder["store"].dispatch({"type": "INCREMENT"})
        return counter(state, action)

    store = create_store(reducer)
    holder["store"] = store

    with pytest.raises(InstrumentError, match="may not dispatch"):
        store.dispatch({"type": "NESTED"})

    store.dispatch({"type": "INCREMENT"})
    assert store.get_state() == 1


def test_compose_applies_right_to_left():
    def add_one(x):
        return x + 1

    def double(x):
        return x * 2

    assert compose(add_one, double)(5) == 11
    assert compose(double)(5) == 10
    assert compose()(5) == 5


def test_enhancer_must_be_callable():
    with pytest.raises(InstrumentError):
        create_store(counter, None, "not an enhancer")
