"""
Load application reducers named on the command line.
"""

import importlib
from typing import Any

from instrument.core.errors import ConfigurationError
from instrument.core.reducer import Reducer, ensure_reducer


def load_reducer(ref: str) -> Reducer:
    """
    Resolve "package.module:attribute" to a reducer.

    Raises:
        ConfigurationError: If the reference is malformed or not callable
    """
    module_name, sep, attr = ref.partition(":")
    if not sep or not module_name or not attr:
        raise ConfigurationError(f"Reducer reference must look like 'module:function', got {ref!r}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigurationError(f"Cannot import reducer module {module_name!r}: {e}") from e

    target: Any = module
    for part in attr.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise ConfigurationError(f"{module_name!r} has no attribute {attr!r}") from e
    return ensure_reducer(target)
