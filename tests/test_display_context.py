from __future__ import annotations

import queue
import threading
from types import SimpleNamespace
from unittest.mock import patch

import pytest

from gg_toolkit import config, display_context, geom_point, ggplot
from gg_toolkit.display_context import (
    DisplayError,
    RenderContext,
    as_context,
    available_sinks,
    create_context,
    current_context,
    default_context,
    detect_environment,
    display,
    register_sink,
    reset_default_context,
    use_render_context,
)

DOC = {"kind": "plot", "layers": [], "scales": []}


class _Collect:
    def __init__(self) -> None:
        self.seen: list[dict] = []

    def display(self, document) -> None:
        self.seen.append(document)


class _Failing:
    def display(self, document) -> None:
        raise OSError("pipe closed")


def test_explicit_context_receives_document() -> None:
    sink = _Collect()
    display(DOC, context=RenderContext(sink))
    assert sink.seen == [DOC]


def test_bare_sink_is_accepted_as_context() -> None:
    sink = _Collect()
    display(DOC, context=sink)
    assert sink.seen == [DOC]


def test_plot_objects_are_converted_to_documents() -> None:
    sink = _Collect()
    display(ggplot() + geom_point(), context=sink)
    assert sink.seen[0]["layers"][0]["geom"] == "point"


def test_non_document_is_rejected() -> None:
    with pytest.raises(TypeError, match="display\\(\\)"):
        display(5, context=_Collect())


def test_use_render_context_nests_and_restores() -> None:
    outer, inner = _Collect(), _Collect()
    with use_render_context(outer) as outer_ctx:
        with use_render_context(RenderContext(inner, "inner")):
            display(DOC)
        assert current_context() is outer_ctx
        display(DOC)
    assert len(inner.seen) == 1
    assert len(outer.seen) == 1


def test_explicit_context_beats_active_block() -> None:
    active, explicit = _Collect(), _Collect()
    with use_render_context(active):
        display(DOC, context=explicit)
    assert explicit.seen == [DOC]
    assert active.seen == []


def test_render_context_is_isolated_per_thread() -> None:
    main_sink, thread_sink = _Collect(), _Collect()
    q: queue.Queue[object] = queue.Queue()

    def _worker() -> None:
        with use_render_context(thread_sink) as ctx:
            q.put(current_context() is ctx)
            display(DOC)

    with use_render_context(main_sink) as main_ctx:
        t = threading.Thread(target=_worker)
        t.start()
        t.join()
        assert q.get(timeout=1) is True
        assert current_context() is main_ctx
        display(DOC)

    assert len(main_sink.seen) == 1
    assert len(thread_sink.seen) == 1


def test_sink_failure_is_wrapped_and_chained() -> None:
    with pytest.raises(DisplayError, match="pipe closed") as excinfo:
        display(DOC, context=RenderContext(_Failing(), "flaky"))
    assert isinstance(excinfo.value.__cause__, OSError)


def test_builtin_sinks_are_registered() -> None:
    assert {"notebook", "widget", "browser"} <= set(available_sinks())


def test_register_sink_rejects_duplicates() -> None:
    register_sink("test-duplicate", _Collect, replace=True)
    with pytest.raises(ValueError, match="already registered"):
        register_sink("test-duplicate", _Collect)
    register_sink("test-duplicate", _Collect, replace=True)
    assert isinstance(create_context("test-duplicate").sink, _Collect)


def test_unknown_sink_name_lists_registered_ones() -> None:
    with pytest.raises(ValueError, match="notebook"):
        create_context("no-such-sink")


def test_sink_name_resolves_through_registry() -> None:
    register_sink("test-named", _Collect, replace=True)
    with use_render_context("test-named") as ctx:
        display(DOC)
    assert ctx.name == "test-named"
    assert ctx.sink.seen == [DOC]


def test_as_context_rejects_other_values() -> None:
    with pytest.raises(TypeError, match="RenderContext"):
        as_context(42)


def test_detect_environment_prefers_configuration() -> None:
    config.configure(display="widget")
    assert detect_environment() == "widget"


@pytest.mark.parametrize(
    ("shell", "expected"),
    [
        (None, "browser"),
        (SimpleNamespace(kernel=None), "browser"),
        (SimpleNamespace(kernel=object()), "notebook"),
    ],
)
def test_detect_environment_from_shell(
    monkeypatch: pytest.MonkeyPatch, shell, expected: str
) -> None:
    monkeypatch.delenv(config.ENV_DISPLAY, raising=False)
    config.reset_config()
    with patch.object(display_context, "_get_ipython_shell", return_value=shell):
        assert detect_environment() == expected


def test_default_context_is_cached_until_reset() -> None:
    register_sink("test-default", _Collect, replace=True)
    config.configure(display="test-default")
    first = default_context()
    assert default_context() is first

    reset_default_context()
    second = default_context()
    assert second is not first
    assert second.name == "test-default"


def test_display_without_context_uses_default() -> None:
    register_sink("test-fallback", _Collect, replace=True)
    config.configure(display="test-fallback")
    display(DOC)
    assert default_context().sink.seen == [DOC]
