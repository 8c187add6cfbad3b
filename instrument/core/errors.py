"""
Exception types for the time-travel instrumentation engine.
"""


class InstrumentError(Exception):
    """Base class for all instrumentation errors."""
    pass


class InvalidActionError(InstrumentError):
    """Raised when an action is not a mapping or has no "type"."""
    pass


class ConfigurationError(InstrumentError):
    """Raised when the reducer is not callable or the store is instrumented twice."""
    pass


class SnapshotError(InstrumentError):
    """Raised when an imported lifted-state snapshot fails validation."""
    pass
