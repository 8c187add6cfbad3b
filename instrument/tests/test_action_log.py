"""
Tests for the action log and the stage/skip index.
"""

from instrument.core.actions import INIT_ACTION
from instrument.log import ActionLog, LogEntry, StageIndex


def test_log_seeded_with_init_action():
    log = ActionLog()

    assert len(log) == 1
    assert log.get(0).action == INIT_ACTION
    assert log.next_action_id == 1


def test_append_assigns_monotonic_ids():
    log = ActionLog()

    ids = [log.append({"type": "A"}, timestamp=i) for i in range(5)]

    assert ids == [1, 2, 3, 4, 5]
    assert log.get(3).timestamp == 2
    assert [entry.id for entry in log] == [0, 1, 2, 3, 4, 5]


def test_reset_discards_history():
    log = ActionLog()
    log.append({"type": "A"})
    log.append({"type": "B"})

    log.reset()

    assert len(log) == 1
    assert 1 not in log
    assert log.append({"type": "C"}) == 1


def test_replace_continues_after_highest_id():
    log = ActionLog()
    entries = {
        0: LogEntry(id=0, action=dict(INIT_ACTION)),
        7: LogEntry(id=7, action={"type": "A"}),
    }

    log.replace(entries, next_action_id=3)

    assert 7 in log
    assert log.next_action_id == 8
    assert log.append({"type": "B"}) == 8


def test_to_records_uses_perform_action_shape():
    log = ActionLog()
    log.append({"type": "A", "payload": 1}, timestamp=123)

    records = log.to_records()

    assert records[1] == {
        "type": "PERFORM_ACTION",
        "action": {"type": "A", "payload": 1},
        "timestamp": 123,
    }


def test_stage_and_position():
    index = StageIndex()

    assert index.stage(1) == 1
    assert index.stage(2) == 2
    assert index.staged == [0, 1, 2]
    assert index.position(2) == 2
    assert index.position(9) is None


def test_toggle_keeps_order_and_membership():
    index = StageIndex([0, 1, 2, 3])

    assert index.toggle(2) is True
    assert index.toggle(1) is True
    assert index.skipped == [1, 2]
    assert index.staged == [0, 1, 2, 3]

    assert index.toggle(2) is False
    assert index.skipped == [1]
    assert index.is_skipped(1)
    assert not index.is_skipped(2)


def test_sweep_drops_only_skipped_ids():
    index = StageIndex([0, 1, 2, 3, 4, 5])
    index.toggle(4)
    index.toggle(1)

    removed = index.sweep()

    assert removed == [1, 4]
    assert index.staged == [0, 2, 3, 5]
    assert index.skipped == []


def test_reset_back_to_init_only():
    index = StageIndex([0, 1, 2], [2])

    index.reset()

    assert index.staged == [0]
    assert index.skipped == []
