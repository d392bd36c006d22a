"""Render contexts: where a finished plot document is sent for display.

Purpose
-------
A plot document is displayed by exactly one sink (a notebook cell, a widget,
a browser window, a file). This module decides which one.

Architecture
------------
Resolution order for :func:`display`:

1. an explicit ``context=`` argument,
2. the innermost ``with use_render_context(...)`` block on the current
   thread,
3. the process default, resolved lazily from the configuration (or from the
   running environment) and cached until :func:`reset_default_context`.

Sink factories live in a registry keyed by environment name. The registry
and the cached default are guarded by one lock; the context stack is
thread-local, so threads never observe each other's overrides.

Examples
--------
>>> from gg_toolkit.display_context import RenderContext, use_render_context
>>> class Collect:
...     def __init__(self):
...         self.seen = []
...     def display(self, document):
...         self.seen.append(document)
>>> sink = Collect()
>>> with use_render_context(RenderContext(sink)):  # doctest: +SKIP
...     display({"kind": "plot", "layers": [], "scales": []})
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from .config import get_config

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


class DisplayError(RuntimeError):
    """A display sink failed to show a plot document."""


@runtime_checkable
class DisplaySink(Protocol):
    def display(self, document: Mapping[str, Any]) -> None: ...


@dataclass(frozen=True)
class RenderContext:
    """A display sink plus the name it was resolved under."""

    sink: DisplaySink
    name: str = "custom"

    def display(self, document: Mapping[str, Any]) -> None:
        """Send ``document`` to the sink, wrapping failures in ``DisplayError``."""
        logger.debug("display via %s sink", self.name)
        try:
            self.sink.display(document)
        except DisplayError:
            raise
        except Exception as exc:
            raise DisplayError(f"Display sink {self.name!r} failed: {exc}") from exc


SinkFactory = Callable[[], DisplaySink]

_REGISTRY_LOCK = threading.RLock()
_SINK_FACTORIES: dict[str, SinkFactory] = {}
_BUILTINS_LOADED = False
_DEFAULT_CONTEXT: RenderContext | None = None

_CONTEXT_LOCAL = threading.local()


def _ensure_builtin_sinks() -> None:
    global _BUILTINS_LOADED
    with _REGISTRY_LOCK:
        if _BUILTINS_LOADED:
            return
        from .display_sinks import BrowserSink, NotebookSink, WidgetSink

        for name, factory in (
            ("notebook", NotebookSink),
            ("widget", WidgetSink),
            ("browser", BrowserSink),
        ):
            _SINK_FACTORIES.setdefault(name, factory)
        _BUILTINS_LOADED = True


def register_sink(name: str, factory: SinkFactory, *, replace: bool = False) -> None:
    """Register ``factory`` as the sink for environment ``name``.

    Raises
    ------
    ValueError
        If ``name`` is already registered and ``replace`` is False.
    """
    if not isinstance(name, str) or not name:
        raise ValueError(f"register_sink() name must be a non-empty str, got {name!r}")
    if not callable(factory):
        raise TypeError("register_sink() factory must be callable")
    _ensure_builtin_sinks()
    with _REGISTRY_LOCK:
        if name in _SINK_FACTORIES and not replace:
            raise ValueError(f"Display sink {name!r} is already registered; pass replace=True")
        _SINK_FACTORIES[name] = factory
    logger.debug("registered display sink %r", name)


def available_sinks() -> tuple[str, ...]:
    _ensure_builtin_sinks()
    with _REGISTRY_LOCK:
        return tuple(_SINK_FACTORIES)


def create_context(name: str) -> RenderContext:
    """Instantiate the sink registered under ``name``."""
    _ensure_builtin_sinks()
    with _REGISTRY_LOCK:
        factory = _SINK_FACTORIES.get(name)
    if factory is None:
        raise ValueError(
            f"Unknown display sink {name!r}; registered: {', '.join(available_sinks())}"
        )
    return RenderContext(factory(), name)


def _get_ipython_shell() -> Any | None:
    try:
        from IPython import get_ipython

        return get_ipython()
    except Exception:
        return None


def detect_environment() -> str:
    """Return the sink name for the running environment.

    A configured ``display`` wins; otherwise an IPython kernel selects
    ``"notebook"`` and anything else ``"browser"``.
    """
    configured = get_config().display
    if configured:
        return configured
    shell = _get_ipython_shell()
    if shell is not None and getattr(shell, "kernel", None) is not None:
        return "notebook"
    return "browser"


def default_context() -> RenderContext:
    """Return the process default context, resolving it on first use."""
    global _DEFAULT_CONTEXT
    with _REGISTRY_LOCK:
        if _DEFAULT_CONTEXT is None:
            name = detect_environment()
            _DEFAULT_CONTEXT = create_context(name)
            logger.info("default display sink resolved to %r", name)
        return _DEFAULT_CONTEXT


def reset_default_context() -> None:
    """Drop the cached default so the next display resolves it again."""
    global _DEFAULT_CONTEXT
    with _REGISTRY_LOCK:
        _DEFAULT_CONTEXT = None


def _context_stack() -> list[RenderContext]:
    """Return the thread-local context stack."""
    stack = getattr(_CONTEXT_LOCAL, "stack", None)
    if stack is None:
        stack = []
        _CONTEXT_LOCAL.stack = stack
    return stack


def current_context() -> RenderContext:
    """Return the innermost active context on this thread, or the default."""
    stack = _context_stack()
    if stack:
        return stack[-1]
    return default_context()


@contextmanager
def use_render_context(context: RenderContext | DisplaySink | str) -> Iterator[RenderContext]:
    """Temporarily route displays on this thread to ``context``.

    ``context`` may be a :class:`RenderContext`, a bare sink, or a registered
    sink name.
    """
    ctx = as_context(context)
    stack = _context_stack()
    stack.append(ctx)
    try:
        yield ctx
    finally:
        for i in range(len(stack) - 1, -1, -1):
            if stack[i] is ctx:
                del stack[i]
                break


def as_context(value: RenderContext | DisplaySink | str) -> RenderContext:
    if isinstance(value, RenderContext):
        return value
    if isinstance(value, str):
        return create_context(value)
    if isinstance(value, DisplaySink):
        return RenderContext(value, type(value).__name__)
    raise TypeError(
        f"Expected a RenderContext, a display sink or a sink name, got {type(value).__name__}"
    )


def display(
    document: Mapping[str, Any] | Any,
    context: RenderContext | DisplaySink | str | None = None,
) -> None:
    """Send a plot document to a display sink.

    Parameters
    ----------
    document : Mapping or Plot
        Plot document, or any object with ``as_dict()`` returning one.
    context : RenderContext, sink, or str, optional
        Where to display; see the module docstring for the default.

    Raises
    ------
    TypeError
        If ``document`` is not a mapping.
    DisplayError
        If the sink fails. The original exception is chained.
    """
    if not isinstance(document, Mapping) and hasattr(document, "as_dict"):
        document = document.as_dict()
    if not isinstance(document, Mapping):
        raise TypeError(f"display() expects a plot document mapping, got {type(document).__name__}")
    ctx = as_context(context) if context is not None else current_context()
    ctx.display(document)


__all__ = [
    "DisplayError",
    "DisplaySink",
    "RenderContext",
    "as_context",
    "available_sinks",
    "create_context",
    "current_context",
    "default_context",
    "detect_environment",
    "display",
    "register_sink",
    "reset_default_context",
    "use_render_context",
]
