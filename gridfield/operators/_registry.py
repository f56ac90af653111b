"""
Named registry of per-cell field operators.

A field operator is any callable ``fn(grid, coord, **kwargs)`` returning the
value of a derived quantity at one cell. The registry checks that shape at
registration time, so a bad entry fails where it is added rather than in
the middle of a full-grid sweep.

Usage
-----
    ops = MethodRegistry("field operator")
    ops.register("laplacian", laplacian)
    fn = ops["laplacian"]
    ops.available()  # ["laplacian"]
"""

import inspect
import logging
from typing import Callable

logger = logging.getLogger(__name__)

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY,
               inspect.Parameter.POSITIONAL_OR_KEYWORD)


def _accepts_grid_and_coord(fn: Callable) -> bool:
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError):
        # builtins without introspectable signatures
        return True
    params = list(sig.parameters.values())
    if any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in params):
        return True
    positional = [p for p in params if p.kind in _POSITIONAL]
    required = [p for p in positional if p.default is inspect.Parameter.empty]
    return len(positional) >= 2 and len(required) <= 2


class MethodRegistry:
    """Registry mapping names to per-cell operator callables.

    Parameters
    ----------
    name : str
        Human-readable name for error messages (e.g., "field operator").
    """

    def __init__(self, name: str):
        self.name = name
        self._methods: dict[str, Callable] = {}

    def register(self, key: str, fn: Callable, replace: bool = False) -> None:
        """Register ``fn(grid, coord, **kwargs)`` under ``key``.

        Raises
        ------
        TypeError
            If ``fn`` is not callable as ``fn(grid, coord)``.
        KeyError
            If ``key`` is taken and ``replace`` is False.
        """
        if not callable(fn) or not _accepts_grid_and_coord(fn):
            raise TypeError(
                f"{self.name} method {key!r} must be callable as fn(grid, coord, **kwargs)"
            )
        if key in self._methods and not replace:
            raise KeyError(
                f"{self.name} method {key!r} is already registered; "
                f"pass replace=True to override it"
            )
        logger.debug("registering %s method %r", self.name, key)
        self._methods[key] = fn

    def __getitem__(self, key: str) -> Callable:
        if key not in self._methods:
            raise KeyError(
                f"Unknown {self.name} method: {key!r}. "
                f"Available: {list(self._methods.keys())}"
            )
        return self._methods[key]

    def __contains__(self, key: str) -> bool:
        return key in self._methods

    def available(self) -> list[str]:
        """Return list of registered method names."""
        return list(self._methods.keys())
