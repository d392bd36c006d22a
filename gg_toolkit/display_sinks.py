"""Built-in display sinks.

- :class:`NotebookSink` emits the two-part MIME bundle through IPython's
  rich display.
- :class:`WidgetSink` shows a live :class:`PlotSpecWidget` (anywidget); the
  document is synced to the front-end as a traitlet.
- :class:`BrowserSink` writes a standalone page to a temporary file and
  opens it.
- :class:`HtmlFileSink` writes a standalone page to a fixed path.

Sinks raise whatever their transport raises; :class:`RenderContext
<gg_toolkit.display_context.RenderContext>` wraps it in ``DisplayError``.
"""

from __future__ import annotations

import logging
import tempfile
import webbrowser
from collections.abc import Callable, Mapping
from pathlib import Path
from typing import Any

import anywidget
import ipywidgets as W
import traitlets
from IPython.display import display as ipy_display

from .config import get_config
from .plot_html import html_page
from .serialize import plot_mime_bundle, standardize

logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


class NotebookSink:
    """Display plot documents as notebook cell output."""

    def display(self, document: Mapping[str, Any]) -> None:
        ipy_display(plot_mime_bundle(document), raw=True)


class PlotSpecWidget(anywidget.AnyWidget):
    """Front-end widget that draws the synced ``spec`` with Lets-Plot JS.

    Traitlets (synced to frontend)
    ------------------------------
    spec:
        Plot document as plain JSON values. Assigning a new document redraws.
    js_url:
        Where to load the Lets-Plot library from when the page has not
        loaded it yet.
    """

    spec = traitlets.Dict().tag(sync=True)
    js_url = traitlets.Unicode("").tag(sync=True)

    _esm = r"""
    function loadLetsPlot(url) {
      if (window.LetsPlot) return Promise.resolve(window.LetsPlot);
      if (!window.__ggToolkitLetsPlot) {
        window.__ggToolkitLetsPlot = new Promise((resolve, reject) => {
          const script = document.createElement("script");
          script.src = url;
          script.onload = () => resolve(window.LetsPlot);
          script.onerror = () => reject(new Error("Failed to load " + url));
          document.head.appendChild(script);
        });
      }
      return window.__ggToolkitLetsPlot;
    }

    export default {
      render({ model, el }) {
        const container = document.createElement("div");
        el.appendChild(container);

        function draw() {
          loadLetsPlot(model.get("js_url"))
            .then((LetsPlot) => {
              container.innerHTML = "";
              LetsPlot.buildPlotFromRawSpecs(model.get("spec"), -1, -1, container);
            })
            .catch((err) => {
              container.textContent = String(err);
            });
        }

        model.on("change:spec", draw);
        draw();
        return () => model.off("change:spec", draw);
      },
    };
    """


class WidgetSink:
    """Display plot documents as live widgets inside a flexible host box."""

    def __init__(self, *, width: str = "100%") -> None:
        self._width = width

    def build(self, document: Mapping[str, Any]) -> W.Box:
        """Return the host box holding a widget for ``document``."""
        widget = PlotSpecWidget(spec=standardize(document), js_url=get_config().script_url)
        return W.Box(
            [widget],
            layout=W.Layout(width=self._width, min_width="0", overflow="auto"),
        )

    def display(self, document: Mapping[str, Any]) -> None:
        ipy_display(self.build(document))


class HtmlFileSink:
    """Write each displayed document to ``path`` as a standalone page."""

    def __init__(self, path: str | Path, *, title: str | None = None) -> None:
        self.path = Path(path)
        self._title = title

    def display(self, document: Mapping[str, Any]) -> None:
        self.path.write_text(html_page(document, title=self._title), encoding="utf-8")
        logger.info("plot written to %s", self.path)


class BrowserSink:
    """Open each displayed document in a web browser.

    Parameters
    ----------
    opener : callable, optional
        Called with the page's ``file://`` URI; defaults to
        :func:`webbrowser.open`.
    directory : str or Path, optional
        Where temporary pages are written; the system temp dir by default.
    """

    def __init__(
        self,
        *,
        opener: Callable[[str], Any] | None = None,
        directory: str | Path | None = None,
    ) -> None:
        self._opener = opener if opener is not None else webbrowser.open
        self._directory = Path(directory) if directory is not None else None

    def display(self, document: Mapping[str, Any]) -> None:
        with tempfile.NamedTemporaryFile(
            "w",
            suffix=".html",
            prefix="gg_toolkit_",
            dir=self._directory,
            delete=False,
            encoding="utf-8",
        ) as handle:
            handle.write(html_page(document))
            path = Path(handle.name)
        logger.debug("opening %s in a browser", path)
        self._opener(path.resolve().as_uri())


__all__ = ["BrowserSink", "HtmlFileSink", "NotebookSink", "PlotSpecWidget", "WidgetSink"]
