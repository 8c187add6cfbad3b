"""
Tests for the replay indicator passed to the reducer.

Only the live, forward dispatch of a new action is tagged replaying=False;
every other reducer call is part of a replay.
"""

import pytest

from instrument import ActionCreators, create_store, instrument
from instrument.tests.reducers import SpyReducer

TESTING_ACTION = {"type": "TESTING_ACTION"}
INIT_ACTION = {"type": "@@INIT"}
TESTING_APP_STATE = 42


def tagged(action, replaying):
    return dict(action, replaying=replaying)


@pytest.fixture
def spy():
    return SpyReducer(default=TESTING_APP_STATE)


@pytest.fixture
def replaying_store(spy):
    return create_store(spy, None, instrument())


def test_initial_init_is_not_replaying(spy, replaying_store):
    assert spy.calls[0] == (None, tagged(INIT_ACTION, False))


def test_plain_dispatch_is_not_replaying(spy, replaying_store):
    replaying_store.dispatch(TESTING_ACTION)

    assert spy.calls[1] == (TESTING_APP_STATE, tagged(TESTING_ACTION, False))


def test_perform_action_is_not_replaying(spy, replaying_store):
    replaying_store.dispatch(TESTING_ACTION)
    replaying_store.lifted_store.dispatch(ActionCreators.perform_action(TESTING_ACTION))

    assert spy.calls[1] == (TESTING_APP_STATE, tagged(TESTING_ACTION, False))
    assert spy.calls[2] == (TESTING_APP_STATE, tagged(TESTING_ACTION, False))


def test_init_after_rollback_is_replaying(spy, replaying_store):
    replaying_store.dispatch(TESTING_ACTION)
    replaying_store.lifted_store.dispatch(ActionCreators.rollback())

    assert spy.calls[2] == (None, tagged(INIT_ACTION, True))


def test_init_after_reset_is_replaying(spy, replaying_store):
    replaying_store.dispatch(TESTING_ACTION)
    replaying_store.lifted_store.dispatch(ActionCreators.reset())

    assert spy.calls[2] == (None, tagged(INIT_ACTION, True))


def test_init_after_commit_is_replaying(spy, replaying_store):
    replaying_store.dispatch(TESTING_ACTION)
    replaying_store.lifted_store.dispatch(ActionCreators.commit())

    assert spy.calls[2] == (TESTING_APP_STATE, tagged(INIT_ACTION, True))


def test_all_actions_after_sweep_are_replaying(spy, replaying_store):
    replaying_store.dispatch(TESTING_ACTION)
    replaying_store.lifted_store.dispatch(ActionCreators.sweep())

    assert spy.calls[2] == (None, tagged(INIT_ACTION, True))
    assert spy.calls[3] == (TESTING_APP_STATE, tagged(TESTING_ACTION, True))


def test_untoggled_downstream_action_is_replaying(spy, replaying_store):
    next_action = {"type": "NEXT_TESTING_ACTION"}
    replaying_store.dispatch(TESTING_ACTION)
    replaying_store.dispatch(next_action)

    replaying_store.lifted_store.dispatch(ActionCreators.toggle_action(1))

    assert len(spy.calls) == 4
    assert spy.calls[3] == (TESTING_APP_STATE, tagged(next_action, True))


def test_all_actions_after_import_are_replaying(spy, replaying_store):
    replaying_store.dispatch(TESTING_ACTION)
    exported_state = replaying_store.export_state()

    import_spy = SpyReducer(default=TESTING_APP_STATE)
    import_store = create_store(import_spy, None, instrument())
    import_store.lifted_store.dispatch(ActionCreators.import_state(exported_state))

    assert import_spy.calls[0] == (None, tagged(INIT_ACTION, False))
    assert import_spy.calls[1] == (None, tagged(INIT_ACTION, True))
    assert import_spy.calls[2] == (TESTING_APP_STATE, tagged(TESTING_ACTION, True))


def test_all_actions_after_reducer_replacement_are_replaying(replaying_store):
    replaying_store.dispatch(TESTING_ACTION)

    next_spy = SpyReducer(default=TESTING_APP_STATE)
    replaying_store.replace_reducer(next_spy)

    assert next_spy.calls == [
        (None, tagged(INIT_ACTION, True)),
        (TESTING_APP_STATE, tagged(TESTING_ACTION, True)),
    ]


def test_stored_actions_are_not_tagged(replaying_store):
    replaying_store.dispatch(TESTING_ACTION)

    entry = replaying_store.get_lifted_state().log.get(1)

    assert "replaying" not in entry.action
    assert "replaying" not in replaying_store.export_state()["actionsById"][1]["action"]
