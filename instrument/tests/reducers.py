"""
Reducers shared by the tests (and importable by the CLI as module:function).
"""


def counter(state, action):
    if state is None:
        state = 0
    if action["type"] == "INCREMENT":
        return state + 1
    if action["type"] == "DECREMENT":
        return state - 1
    return state


def double_counter(state, action):
    if state is None:
        state = 0
    if action["type"] == "INCREMENT":
        return state + 2
    if action["type"] == "DECREMENT":
        return state - 2
    return state


def counter_with_bug(state, action):
    if state is None:
        state = 0
    if action["type"] == "INCREMENT":
        return state + 1
    if action["type"] == "DECREMENT":
        return mistake - 1  # noqa: F821
    if action["type"] == "SET_UNDEFINED":
        return None
    return state


class CountingReducer:
    """Returns how many times it was called before this call."""

    def __init__(self):
        self.calls = 0

    def __call__(self, state, action):
        count = self.calls
        self.calls += 1
        return count


class SpyReducer:
    """Records (state, action) of every call; state defaults to 42."""

    def __init__(self, default=42):
        self.default = default
        self.calls = []

    def __call__(self, state, action):
        self.calls.append((state, action))
        return self.default if state is None else state
