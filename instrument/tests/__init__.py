"""
Test suite for the lifted-state engine.

Focus areas:
- Time-travel operations (commit, rollback, reset, toggle, sweep, jump, import)
- Minimal recomputation (reducer call counts)
- Reducer failure containment
- Replay indicator tagging
- Snapshot export/import
"""
